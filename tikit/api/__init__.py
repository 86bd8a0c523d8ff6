"""Jira REST API access for tikit."""
