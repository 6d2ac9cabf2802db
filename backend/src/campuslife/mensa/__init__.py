from .schemas import Dish
from .service import filter_dishes, get_menu

__all__ = ["Dish", "filter_dishes", "get_menu"]
