from resources.base import Resource
from resources.incidents import IncidentsResource

__all__ = ["Resource", "IncidentsResource"]
