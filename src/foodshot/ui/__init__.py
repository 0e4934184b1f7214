"""Gradio user interface for Food Photography Pro."""
