"""Training math: periodization, prescription tables, streaks, plan metrics."""
