"""
AgroFlow services
"""
