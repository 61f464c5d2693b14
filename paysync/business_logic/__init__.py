# paysync/business_logic/__init__.py
# Managers are imported from their modules directly (paysync.business_logic.employee_manager, ...)
# so that entities can be imported by the data access layer without a cycle.
