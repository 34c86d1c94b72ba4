"""Ownership-scoped task persistence with transactional reference integrity."""
