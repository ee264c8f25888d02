"""
Lambda handlers package for AWS Lambda functions.
"""
from .api import handler, CycleApi

__all__ = ["handler", "CycleApi"]
