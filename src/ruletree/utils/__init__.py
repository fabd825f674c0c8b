"""
Contains some useful utility functions to be used in rules.
"""
from .query_object import optional_field, required_field
