import json

CSV_HEADER = "Rule_Id__c,State__c,Guideline_Text__c,Rule_JSON__c\n"


def csv_row(rule_id: str, state: str, text: str, rule: object) -> str:
    """Build one CSV row with the rule JSON quoted the way the export does."""
    rule_json = rule if isinstance(rule, str) else json.dumps(rule)
    quoted = rule_json.replace('"', '""')
    return f'{rule_id},{state},"{text}","{quoted}"\n'
