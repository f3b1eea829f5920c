from .reversal import EligibilityResponse, ReversalRequestIn, ReversalRow

__all__ = ["EligibilityResponse", "ReversalRequestIn", "ReversalRow"]
