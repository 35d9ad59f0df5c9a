"""AgroFlow - farm management API"""
