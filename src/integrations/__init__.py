"""
Integrations for external services and APIs.

This package contains adapters for remote gateways such as AWS API Gateway.
"""
