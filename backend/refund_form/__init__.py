# backend/refund_form/__init__.py
"""
AWSKRUG meetup refund form backend package.

This package contains:
- main: FastAPI application entrypoint
- subgroups: subgroup catalogue (Slack channel / contact lookup)
- refund: refund request validation and submission
- slack: Slack message formatting and Web API client
- web: refund form page
"""
