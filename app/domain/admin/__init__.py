"""Admin domain - admin accounts, sessions and password management"""
