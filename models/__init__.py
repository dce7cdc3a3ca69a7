from .inventory import Category, Location, Component
from .ledger import Movement, MovementKind
from .user import User, Role
