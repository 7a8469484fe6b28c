"""
Pattern tables for signal extraction and intent classification.

All patterns are matched case-insensitively against the raw message.
Tags are open vocabulary: adding a row here extends what the
recommender understands without touching any types.
"""

import re
from typing import Dict, List, Tuple

from .constants import IntentClass


def _compile(pattern: str) -> re.Pattern:
    # ASCII word boundaries: "plan" still counts inside "éplan"
    return re.compile(pattern, re.IGNORECASE | re.ASCII)


# (pattern, tags) - every matching row contributes all of its tags
DOMAIN_KEYWORDS: List[Tuple[re.Pattern, Tuple[str, ...]]] = [
    (_compile(r'\b(research|paper|thesis|hypothesis|evidence|citation|academic)\b'),
     ('research', 'academic')),
    (_compile(r'\b(code|programming|api|function|class|module|repository|git)\b'),
     ('code', 'programming')),
    (_compile(r'\b(legal|law|contract|compliance|license|rights|patent|ip)\b'),
     ('legal', 'law', 'compliance')),
    (_compile(r'\b(finance|budget|cost|revenue|profit|investment|portfolio)\b'),
     ('finance', 'budget')),
    (_compile(r'\b(simulation|forecast|scenario|model|predict)\b'),
     ('simulation', 'forecast')),
    (_compile(r'\b(governance|vote|proposal|policy|decision|council)\b'),
     ('governance', 'vote')),
    (_compile(r'\b(diagram|sketch|whiteboard|visual|brainstorm|mind.?map)\b'),
     ('diagram', 'visual', 'brainstorm')),
    (_compile(r'\b(agent|automation|workflow|bot|orchestrate)\b'),
     ('agent', 'automation')),
    (_compile(r'\b(database|query|sql|schema|table|record)\b'),
     ('database', 'query')),
    (_compile(r'\b(knowledge|entity|relation|ontology|graph)\b'),
     ('knowledge', 'entity')),
    (_compile(r'\b(publish|marketplace|listing|sell|distribute)\b'),
     ('marketplace', 'publish')),
    (_compile(r'\b(logic|argument|proof|contradiction|premise|inference)\b'),
     ('logic', 'argument')),
]

# (pattern, weight) - phrases that show concrete intent to act
FRICTION_PATTERNS: List[Tuple[re.Pattern, float]] = [
    (_compile(r'\b(i need|how do i|how can i|help me)\b'), 1.0),
    (_compile(r'\b(build|create|make|implement|develop|code)\b'), 0.9),
    (_compile(r'\b(plan|steps|milestones|roadmap|schedule)\b'), 0.8),
    (_compile(r'\b(simulate|forecast|predict|model|scenario|what.?if)\b'), 0.9),
    (_compile(r'\b(legal|license|compliance|rights|contract|patent)\b'), 0.8),
    (_compile(r'\b(budget|cost|revenue|profit|roi|financial)\b'), 0.7),
    (_compile(r'\b(publish|submit|release|distribute|list|deploy)\b'), 0.8),
    (_compile(r'\b(prove|verify|audit|check|validate|contradict)\b'), 0.7),
    (_compile(r'\b(organize|outline|structure|define|categorize)\b'), 0.6),
    (_compile(r'\b(turn.?into|convert|transform|make.?this)\b'), 0.9),
]

# One pattern per action intent; every occurrence counts toward the score
INTENT_PATTERNS: Dict[IntentClass, re.Pattern] = {
    IntentClass.BUILD: _compile(
        r'\b(build|code|implement|develop|architect|refactor|deploy|program|debug)\b'),
    IntentClass.PLAN: _compile(
        r'\b(plan|steps|milestones|roadmap|schedule|timeline|execute|strategy)\b'),
    IntentClass.SIMULATE: _compile(
        r'\b(simulate|forecast|predict|model|scenario|what.?if|numbers|project|monte.?carlo)\b'),
    IntentClass.PUBLISH: _compile(
        r'\b(publish|submit|release|distribute|list|deploy|launch|ship)\b'),
    IntentClass.AUDIT: _compile(
        r'\b(audit|verify|prove|check|validate|compliance|contradict|review|inspect)\b'),
    IntentClass.STRUCTURE: _compile(
        r'\b(organize|outline|structure|define|categorize|classify|schema|taxonomy)\b'),
    IntentClass.IDEATE: _compile(
        r'\b(brainstorm|ideate|explore|what about|possibilities|options|alternatives|imagine)\b'),
}

# "which lens should I use?" - the only case where we show more than one
LENS_REQUEST_PATTERN = _compile(r'what\s+lens|which\s+lens|suggest\s+a?\s*lens')
