"""jsonrules: rule-based validation of JSON documents.

Build a RuleRegistry (programmatically or from a YAML schema), then validate
documents against it with the ValidationEngine.
"""

__version__ = "1.0.0"
