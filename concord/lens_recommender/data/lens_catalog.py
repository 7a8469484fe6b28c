"""
Lens catalog data - recommendation metadata for every lens.

Single source for recommendation scoring. Rows extend the lens manifests
with the tags, actions and costs the recommender needs. Bump
CATALOG_VERSION whenever a row changes.
"""

CATALOG_VERSION = '2024.1'

LENS_CATALOG_DATA = [
    {
        'lens_id': 'paper',
        'name': 'Paper',
        'categories': ['knowledge', 'research'],
        'domain_tags': ['research', 'academic', 'writing', 'hypothesis', 'evidence',
                        'citation', 'thesis', 'experiment'],
        'intent_tags': ['STRUCTURE', 'PLAN', 'AUDIT'],
        'entry_cost': 'med',
        'supported_actions': ['draft', 'audit', 'plan'],
        'required_scope': 'local',
        'recommended_when': ['research intent detected', 'academic writing mentioned'],
        'suppress_when': ['quick question about research'],
    },
    {
        'lens_id': 'reasoning',
        'name': 'Reasoning',
        'categories': ['knowledge', 'logic'],
        'domain_tags': ['logic', 'argument', 'proof', 'contradiction', 'premise',
                        'inference', 'debate'],
        'intent_tags': ['STRUCTURE', 'AUDIT'],
        'entry_cost': 'med',
        'supported_actions': ['audit', 'plan'],
        'required_scope': 'local',
        'recommended_when': ['logical argument construction', 'contradiction detection needed'],
        'suppress_when': [],
    },
    {
        'lens_id': 'council',
        'name': 'Council',
        'categories': ['governance'],
        'domain_tags': ['governance', 'vote', 'proposal', 'budget', 'policy', 'decision',
                        'consensus'],
        'intent_tags': ['PLAN', 'AUDIT', 'PUBLISH'],
        'entry_cost': 'high',
        'supported_actions': ['plan', 'audit', 'publish'],
        'required_scope': 'global',
        'recommended_when': ['governance decision needed', 'budget planning mentioned'],
        'suppress_when': ['casual governance discussion'],
    },
    {
        'lens_id': 'agents',
        'name': 'Agents',
        'categories': ['ai', 'automation'],
        'domain_tags': ['agent', 'automation', 'workflow', 'bot', 'task', 'pipeline',
                        'orchestration'],
        'intent_tags': ['BUILD', 'PLAN'],
        'entry_cost': 'high',
        'supported_actions': ['plan', 'simulate'],
        'required_scope': 'local',
        'recommended_when': ['automation workflow described', 'agent creation requested'],
        'suppress_when': [],
    },
    {
        'lens_id': 'sim',
        'name': 'Simulation',
        'categories': ['science', 'forecasting'],
        'domain_tags': ['simulation', 'forecast', 'scenario', 'model', 'predict', 'numbers',
                        'projection', 'what-if', 'monte-carlo'],
        'intent_tags': ['SIMULATE', 'PLAN'],
        'entry_cost': 'med',
        'supported_actions': ['simulate', 'plan'],
        'required_scope': 'local',
        'recommended_when': ['numerical simulation requested', 'scenario analysis mentioned'],
        'suppress_when': [],
    },
    {
        'lens_id': 'code',
        'name': 'Code',
        'categories': ['core', 'development'],
        'domain_tags': ['code', 'programming', 'api', 'architecture', 'implementation',
                        'debug', 'refactor', 'deploy'],
        'intent_tags': ['BUILD'],
        'entry_cost': 'low',
        'supported_actions': ['plan', 'draft'],
        'required_scope': 'local',
        'recommended_when': ['code implementation requested', 'architecture discussion'],
        'suppress_when': ['quick code question'],
    },
    {
        'lens_id': 'law',
        'name': 'Law',
        'categories': ['legal', 'compliance'],
        'domain_tags': ['legal', 'law', 'contract', 'compliance', 'license', 'rights',
                        'regulation', 'liability', 'patent', 'ip'],
        'intent_tags': ['AUDIT', 'STRUCTURE'],
        'entry_cost': 'med',
        'supported_actions': ['audit', 'draft', 'legal-check'],
        'required_scope': 'local',
        'recommended_when': ['legal review needed', 'compliance check requested'],
        'suppress_when': [],
    },
    {
        'lens_id': 'graph',
        'name': 'Graph',
        'categories': ['knowledge'],
        'domain_tags': ['knowledge', 'entity', 'relation', 'ontology', 'taxonomy',
                        'connection', 'mapping'],
        'intent_tags': ['STRUCTURE', 'AUDIT'],
        'entry_cost': 'med',
        'supported_actions': ['plan', 'audit'],
        'required_scope': 'local',
        'recommended_when': ['knowledge mapping requested', 'relationship analysis needed'],
        'suppress_when': [],
    },
    {
        'lens_id': 'whiteboard',
        'name': 'Whiteboard',
        'categories': ['collaboration', 'visual'],
        'domain_tags': ['diagram', 'sketch', 'brainstorm', 'visual', 'collaborate', 'board',
                        'freeform', 'mind-map'],
        'intent_tags': ['IDEATE', 'STRUCTURE'],
        'entry_cost': 'low',
        'supported_actions': ['draft', 'plan'],
        'required_scope': 'none',
        'recommended_when': ['visual brainstorming requested', 'diagram creation needed'],
        'suppress_when': [],
    },
    {
        'lens_id': 'database',
        'name': 'Database',
        'categories': ['system', 'data'],
        'domain_tags': ['database', 'query', 'sql', 'schema', 'table', 'data', 'record'],
        'intent_tags': ['BUILD', 'STRUCTURE'],
        'entry_cost': 'med',
        'supported_actions': ['plan', 'audit'],
        'required_scope': 'local',
        'recommended_when': ['data structuring needed', 'schema design requested'],
        'suppress_when': [],
    },
    {
        'lens_id': 'finance',
        'name': 'Finance',
        'categories': ['finance'],
        'domain_tags': ['finance', 'budget', 'investment', 'portfolio', 'revenue', 'cost',
                        'profit', 'expense', 'roi'],
        'intent_tags': ['SIMULATE', 'PLAN', 'AUDIT'],
        'entry_cost': 'med',
        'supported_actions': ['simulate', 'plan', 'audit'],
        'required_scope': 'local',
        'recommended_when': ['financial analysis requested', 'budget planning mentioned'],
        'suppress_when': [],
    },
    {
        'lens_id': 'marketplace',
        'name': 'Marketplace',
        'categories': ['governance', 'commerce'],
        'domain_tags': ['marketplace', 'listing', 'sell', 'buy', 'publish', 'distribute',
                        'license'],
        'intent_tags': ['PUBLISH'],
        'entry_cost': 'high',
        'supported_actions': ['publish'],
        'required_scope': 'market',
        'recommended_when': ['user wants to publish or list something'],
        'suppress_when': [],
    },
]
