"""
GenAI audit trail persistence layer.

Entities, transfer schemas, mappers and access services for models,
conversation types, conversations, prompt overrides, messages, citations
and user feedback.
"""

__version__ = "0.1.0"
