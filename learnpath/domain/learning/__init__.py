"""
Learning bounded context - Domain layer.

This context handles structured learning content and user progress:
- Learning paths made of ordered sections and items
- Per-user feedback (rating and completion) on items
- Rating aggregates and completion ratios

Aggregates:
- LearningPath: root of the path -> section -> item tree
- ItemFeedback: one user's feedback on one item
"""
