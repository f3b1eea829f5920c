"""
Refund Eligibility Assistant
Decides whether investment reversal requests qualify for a refund
"""
