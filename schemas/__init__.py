from .inventory import Component, ComponentCreate, ComponentUpdate, ComponentFilter
from .taxonomy import Term, TermCreate
from .ledger import Movement, MovementCreate, MovementFilter, LoanReturn
from .user import User, UserCreate, LoginRequest, LoginResponse, SessionIdentity
from .contact import ContactMessage
from .reports import TabularReport
