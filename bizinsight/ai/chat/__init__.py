"""
AI chat module for the business insights assistant.

Answers business-strategy questions using the user's business profile as
context for the chat model.
"""
