"""Record kinds shared with existing store instances."""

LEARNING_PATH = "LearningPath"
LEARNING_SECTION = "LearningSection"
LEARNING_ITEM = "LearningItem"
ITEM_FEEDBACK = "ItemFeedback"
