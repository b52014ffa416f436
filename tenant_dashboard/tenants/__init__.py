"""
Tenant packages. Each subpackage exports a `customization` bundle.
"""
