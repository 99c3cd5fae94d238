"""
RadReport Explainer package.

Provides:
- Patient-friendly rewording of radiology impressions via the Anthropic Messages API
- A console driver for sample impressions and a FastAPI service
"""
