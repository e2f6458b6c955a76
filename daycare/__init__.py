"""Dog daycare dashboard API"""
