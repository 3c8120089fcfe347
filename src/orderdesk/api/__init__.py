"""API module for Orderdesk.

- Validates inputs, reads/writes DB through the order service
- Returns payloads for the dashboard UI
- Forbidden: SQL outside db.repo, aggregation logic
"""
