"""
Core package for the tenant-customizable dashboard.

`customization` defines the bundle contract a tenant package exports,
`ui` holds the host shell that renders any bundle, and `tenants` contains
the tenant packages themselves. The Streamlit entry point is the top-level
`app.py`.
"""
