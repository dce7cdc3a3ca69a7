from .users import authenticate_user, get_users, create_user, delete_user
from .inventory import get_components, get_component, create_component, update_component, delete_component
from .taxonomy import get_terms, create_term, rename_term, delete_term
from .ledger import record_movement, return_loan, get_movement, get_movements
from .reports import component_report, movement_report, generate_excel_report, generate_pdf_report
from .contact import send_contact_message
