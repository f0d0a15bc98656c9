"""Service layer: profile and skill operations, each returning a ServiceResult.

Services build on the domain and infrastructure layers and read config.
Nothing here imports from commands or output.
"""
