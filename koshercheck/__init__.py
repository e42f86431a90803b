"""
Kosher Certification Catalog Tool

Modules:
    models      - Data models (CertificationRecord, catalog serialization)
    common      - Shared utilities (config loader, text normalization, logging)
    extraction  - Catalog extraction from the vendor product page
    matching    - Known certification name matching for OCR/barcode text
    search      - Catalog search and filter helpers
    storage     - Key-value stores, catalog cache and known-name list refresh
    ocr         - Client for the external OCR service
"""
