"""Taskboard - task tracking API with a store-aware authentication gate."""
