"""Prompt templates: pure functions from structured input to prompt text."""
