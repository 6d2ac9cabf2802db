from .courses import Course  # noqa: F401
from .meals import MealLog  # noqa: F401
from .profile import WellnessProfile  # noqa: F401
