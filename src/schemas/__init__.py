"""
Pydantic request and response models for the catalog services.
"""
