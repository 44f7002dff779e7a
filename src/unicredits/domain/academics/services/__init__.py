from unicredits.domain.academics.services.gpa_scorer import calculate_gpa_score

__all__ = ["calculate_gpa_score"]
