"""Summarise Terraform JSON plans by action and resource type as text, JSON or HTML."""

__version__ = "0.1.0"