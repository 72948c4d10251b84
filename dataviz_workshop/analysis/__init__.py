"""
Subpackage for the workshop charts and models.

``charts`` turns declarative chart specifications into seaborn figures,
``fuel_economy`` and ``health_survey`` define the workshop sections,
``visualizations`` renders them and ``regression`` fits the models that
back the trend lines.
"""

__all__ = ["charts", "fuel_economy", "health_survey", "regression", "visualizations"]
