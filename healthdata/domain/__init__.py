"""Entity models: users and the records they create.

Framework-agnostic apart from Pydantic, which handles field declaration and
identity immutability.
"""
