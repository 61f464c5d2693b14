# paysync/presentation/dashboard_ui.py

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                             QMessageBox, QGroupBox, QGridLayout)
from PyQt5.QtCore import pyqtSignal

from paysync.business_logic.employee_manager import EmployeeManager
from paysync.business_logic.payroll_manager import PayrollManager
from paysync.business_logic.entities.payroll_summary_entity import PayrollSummary
from paysync.config import APP_NAME, CURRENCY_SYMBOL
from paysync.presentation.custom_widgets import StatCard, DepartmentBar
import logging

logger = logging.getLogger(__name__)

class DashboardUI(QWidget):
    sample_data_generated = pyqtSignal()

    def __init__(self, employee_manager: EmployeeManager, payroll_manager: PayrollManager, parent=None):
        super().__init__(parent)
        self.employee_manager = employee_manager
        self.payroll_manager = payroll_manager
        self._init_ui()
        self.refresh()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)

        header_layout = QHBoxLayout()
        title = QLabel(f"Welcome to {APP_NAME} - Your payroll management system", self)
        title.setStyleSheet("font-weight: bold; font-size: 16px;")
        self.sample_data_button = QPushButton("Generate Sample Data", self)
        self.sample_data_button.clicked.connect(self._generate_sample_data)
        header_layout.addWidget(title)
        header_layout.addStretch()
        header_layout.addWidget(self.sample_data_button)
        main_layout.addLayout(header_layout)

        cards_layout = QGridLayout()
        self.active_employees_card = StatCard("Active Employees", parent=self)
        self.total_payroll_card = StatCard("Total Payroll", description="Current month", parent=self)
        self.average_salary_card = StatCard("Average Salary", parent=self)
        self.pending_payrolls_card = StatCard("Pending Payrolls", parent=self)
        for column, card in enumerate((self.active_employees_card, self.total_payroll_card,
                                       self.average_salary_card, self.pending_payrolls_card)):
            cards_layout.addWidget(card, 0, column)
        main_layout.addLayout(cards_layout)

        self.departments_box = QGroupBox("Department Overview", self)
        self.departments_layout = QVBoxLayout(self.departments_box)
        main_layout.addWidget(self.departments_box)
        main_layout.addStretch()

    def refresh(self):
        try:
            summary = self.payroll_manager.get_payroll_summary()
            has_employees = bool(self.employee_manager.list_employees())
        except Exception as e:
            logger.error(f"Error loading dashboard data: {e}", exc_info=True)
            QMessageBox.critical(self, "Load Error", f"Failed to load dashboard data: {e}")
            return
        self._show_summary(summary)
        self.sample_data_button.setVisible(not has_employees)

    def _show_summary(self, summary: PayrollSummary):
        self.active_employees_card.set_value(str(summary.total_employees))
        self.total_payroll_card.set_value(f"{CURRENCY_SYMBOL}{summary.total_payroll:,.2f}")
        self.average_salary_card.set_value(f"{CURRENCY_SYMBOL}{summary.average_salary:,.2f}")
        self.pending_payrolls_card.set_value(str(summary.pending_payrolls))

        while self.departments_layout.count():
            item = self.departments_layout.takeAt(0)
            if item and item.widget():
                item.widget().deleteLater()

        if not summary.departments:
            self.departments_layout.addWidget(QLabel("No department data available", self.departments_box))
            return
        for dept in summary.departments:
            self.departments_layout.addWidget(
                DepartmentBar(dept.name, dept.count, summary.total_employees, self.departments_box))

    def _generate_sample_data(self):
        try:
            self.employee_manager.generate_sample_employees()
            self.payroll_manager.generate_sample_payrolls()
        except Exception as e:
            logger.error(f"Error generating sample data: {e}", exc_info=True)
            QMessageBox.critical(self, "Error", f"Failed to generate sample data: {e}")
            return
        QMessageBox.information(self, "Success", "Sample data generated successfully.")
        self.refresh()
        self.sample_data_generated.emit()
