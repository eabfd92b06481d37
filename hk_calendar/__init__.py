"""
HK Holiday Calendar service
"""
