# paysync/main_app.py
import sys
import logging
from PyQt5.QtWidgets import QApplication, QMainWindow, QTabWidget, QMessageBox
from PyQt5.QtCore import QLocale

# --- Configuration ---
from paysync.config import DATABASE_PATH, APP_NAME, configure_logging

# --- Data Access Layer (DAL) ---
from paysync.data_access.database_manager import DatabaseManager
from paysync.data_access.key_value_store import KeyValueStore
from paysync.data_access.employees_repository import EmployeesRepository
from paysync.data_access.payrolls_repository import PayrollsRepository

# --- Business Logic Layer (BLL) ---
from paysync.business_logic.employee_manager import EmployeeManager
from paysync.business_logic.payroll_manager import PayrollManager

# --- Presentation Layer (UI Tabs) ---
from paysync.presentation.dashboard_ui import DashboardUI
from paysync.presentation.employees_ui import EmployeesUI
from paysync.presentation.payroll_ui import ProcessPayrollUI, PayrollHistoryUI

logger = logging.getLogger(__name__)

class MainWindow(QMainWindow):
    def __init__(self, db_path: str = DATABASE_PATH, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"{APP_NAME} - Payroll Management")
        self.setGeometry(100, 100, 1200, 760)

        logger.info("Initializing Database Manager and creating tables...")
        self.db_manager = DatabaseManager(db_path)
        try:
            self.db_manager.create_tables()
        except Exception as e:
            logger.error(f"FATAL: Could not initialize database: {e}", exc_info=True)
            QMessageBox.critical(self, "Database Error", f"Unable to create or open the database: {e}")
            sys.exit(1)

        logger.info("Initializing Repositories...")
        self.store = KeyValueStore(self.db_manager)
        self.employees_repo = EmployeesRepository(self.store)
        self.payrolls_repo = PayrollsRepository(self.store)

        logger.info("Initializing Managers...")
        self.employee_manager = EmployeeManager(self.employees_repo)
        self.payroll_manager = PayrollManager(
            payrolls_repository=self.payrolls_repo,
            employee_manager=self.employee_manager
        )

        logger.info("Setting up UI...")
        self._setup_ui()
        logger.info("MainWindow initialized and UI setup complete.")

    def _setup_ui(self):
        self.tabs = QTabWidget()

        self.dashboard_tab = DashboardUI(self.employee_manager, self.payroll_manager, self)
        self.tabs.addTab(self.dashboard_tab, "Dashboard")

        self.employees_tab = EmployeesUI(self.employee_manager, self)
        self.tabs.addTab(self.employees_tab, "Employees")

        self.process_payroll_tab = ProcessPayrollUI(self.employee_manager, self.payroll_manager, self)
        self.tabs.addTab(self.process_payroll_tab, "Process Payroll")

        self.payroll_history_tab = PayrollHistoryUI(self.payroll_manager, self)
        self.tabs.addTab(self.payroll_history_tab, "Payroll History")

        # Keep the other tabs in sync after a mutation in one of them
        self.dashboard_tab.sample_data_generated.connect(self._refresh_all)
        self.employees_tab.employees_changed.connect(self._refresh_all)
        self.process_payroll_tab.payroll_processed.connect(self._refresh_all)
        self.payroll_history_tab.payrolls_changed.connect(self._refresh_all)

        self.setCentralWidget(self.tabs)

    def _refresh_all(self):
        self.dashboard_tab.refresh()
        self.employees_tab.load_employees_data()
        self.process_payroll_tab.load_employees()
        self.payroll_history_tab.load_payrolls()

def main():
    configure_logging()
    logger.info("Application starting...")
    app = QApplication(sys.argv)
    QLocale.setDefault(QLocale(QLocale.Language.English, QLocale.Country.UnitedStates))

    main_window = MainWindow()
    main_window.show()
    logger.info("Application started successfully. Main window shown.")
    sys.exit(app.exec_())

if __name__ == '__main__':
    main()
