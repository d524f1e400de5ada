# Services package init
"""
QuickNote Backend — Services Layer
====================================

Service Inventory:
    - NoteStore: In-memory note collection (create/list/delete)
    - AIService (abstract): Interface for suggestions and corrections
    - GeminiService: Concrete AI service using the Google Gemini API
    - prompts: The two prompt variants and suggestion parsing
"""
