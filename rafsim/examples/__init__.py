"""Example drivers built on top of rafsim"""
