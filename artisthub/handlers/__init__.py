"""AWS Lambda entry points (API Gateway proxy integration)."""
