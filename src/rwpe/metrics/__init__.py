from .accuracy import TrialSummary, run_trials, summarize_errors

__all__ = ["TrialSummary", "run_trials", "summarize_errors"]
