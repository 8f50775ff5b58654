"""Service layer - configuration and search"""
