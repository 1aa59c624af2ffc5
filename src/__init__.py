"""
Source Code Root Module

Sales forecast service for the e-commerce admin console.

Layer Structure:
- Domain: Order and forecast entities, the forecasting model, gateway contracts
- Application: Use cases and DTOs
- Infrastructure: Order store gateway and health checks
- Presentation: Controllers for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
