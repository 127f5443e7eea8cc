"""
File Ingestion Processors

Extraction side of file ingestion:
- gateway.py - External converter availability and invocation
- loader.py - Extension-based format dispatch
"""
