"""
Services module - business logic on top of the document store.
"""
