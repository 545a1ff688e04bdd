from .quote_v1 import Quote, QuoteCandidate

__all__ = ["Quote", "QuoteCandidate"]
