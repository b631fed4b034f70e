from assetlens.services.valuation.loan_calculator import LoanAnalysis, LoanTerms, compute_loan, select_base_value

__all__ = ["LoanAnalysis", "LoanTerms", "compute_loan", "select_base_value"]
