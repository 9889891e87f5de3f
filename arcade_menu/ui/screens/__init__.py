"""Screens package"""
