"""Appointments domain - public booking requests and their admin management"""
