"""
File Ingestion Collectors

Discovery side of file ingestion:
- glob_pattern.py - Recursive glob decomposition
- enumerator.py - Asynchronous file enumeration and extension filtering
- document_collector.py - Document ingestion for RAG system
"""
