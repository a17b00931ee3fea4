"""
extraction/ - Annual Report Field Extraction Engine

Modules:
    numeric.py               - Numeric token parsing + tagged field outcomes
    pages.py                 - Page splitting and section (anchor) lookup
    fields.py                - Line-scoped and segment-scoped field extractors
    schema.py                - Section group / field rule definitions
    annual_report_schema.py  - Label schema for the 2023 Form 10-K template
    field_map.py             - Concurrent field map builder (fan-out / merge)
"""
