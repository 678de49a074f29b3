"""Infrastructure modules for the i18n marker facade.

Components:
- i18n: Translation facade (v1 API), markers, locale detection
- i18n.v2: Translation facade with locale reporting
"""
