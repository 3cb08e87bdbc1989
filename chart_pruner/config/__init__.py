"""Configuration, logging setup and exceptions for Chart Pruner."""
