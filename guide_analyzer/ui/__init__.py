"""NiceGUI interface - thin visualization layer for guide analysis.

Responsibilities:
    - PDF selection and analysis trigger
    - Structured analysis display with export buttons
    - Full-text view with keyword search and highlighting
    - Offline indicator

Contains minimal business logic. Delegates all operations to the pipeline.
"""
