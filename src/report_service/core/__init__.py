"""Core business logic"""
