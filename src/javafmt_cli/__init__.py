"""Command-line driver for selecting a javafmt style preset"""
