"""Aggregation module for order statistics.

- Reads orders and produces summaries (revenue, median, top product)
- Forbidden: order mutation, HTTP concerns
"""
