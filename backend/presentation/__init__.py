"""Presentation layer.

Framework-neutral presenters that turn domain data into display models.
The GraphQL layer serialises these models; it adds no display logic.
"""
