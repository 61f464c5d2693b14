# paysync/presentation/payroll_ui.py

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QComboBox,
                             QFormLayout, QDateEdit, QMessageBox, QTableView, QLineEdit,
                             QAbstractItemView, QHeaderView, QGroupBox)
from PyQt5.QtCore import Qt, QAbstractTableModel, QVariant, QModelIndex, pyqtSignal
from PyQt5.QtGui import QColor

from typing import List, Optional, Any
from datetime import date

from paysync.business_logic.entities.payroll_entity import PayrollEntity
from paysync.business_logic.employee_manager import EmployeeManager
from paysync.business_logic.payroll_manager import PayrollManager
from paysync.config import CURRENCY_SYMBOL
from paysync.constants import PayrollStatus
from paysync.exceptions import NotFoundError, ValidationError
from paysync.utils.date_utils import to_display_str, from_qdate, to_qdate, month_bounds
from paysync.utils.validators import validate_pay_period, validate_employee_selected
import logging

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    PayrollStatus.PENDING: QColor("#b7791f"),
    PayrollStatus.PROCESSED: QColor("#2f855a"),
    PayrollStatus.CANCELLED: QColor("#c53030"),
}


def _money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


class PayrollTableModel(QAbstractTableModel):
    def __init__(self, data: Optional[List[PayrollEntity]] = None, parent=None):
        super().__init__(parent)
        self._data: List[PayrollEntity] = data if data is not None else []
        self._headers = ["Employee", "Pay Period", "Base", "Taxes", "Deductions", "Net", "Status", "Processed"]

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self._data)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self._headers)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not (0 <= index.row() < len(self._data)):
            return QVariant()
        payroll = self._data[index.row()]
        col = index.column()

        if role == Qt.ItemDataRole.DisplayRole:
            if col == 0: return payroll.employee_name
            if col == 1: return f"{to_display_str(payroll.pay_period_start)} - {to_display_str(payroll.pay_period_end)}"
            if col == 2: return _money(payroll.base_amount)
            if col == 3: return _money(payroll.taxes)
            if col == 4: return _money(payroll.deductions)
            if col == 5: return _money(payroll.net_amount)
            if col == 6: return payroll.status.value.capitalize()
            if col == 7: return to_display_str(payroll.processed_date)
        elif role == Qt.ItemDataRole.TextAlignmentRole:
            if 2 <= col <= 5:
                return Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            return Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
        elif role == Qt.ItemDataRole.ForegroundRole and col == 6:
            return STATUS_COLORS.get(payroll.status, QVariant())
        elif role == Qt.ItemDataRole.ToolTipRole:
            return f"Payroll ID: {payroll.id}"
        return QVariant()

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if orientation == Qt.Orientation.Horizontal and role == Qt.ItemDataRole.DisplayRole:
            if 0 <= section < len(self._headers):
                return self._headers[section]
        return QVariant()

    def update_data(self, new_data: List[PayrollEntity]):
        self.beginResetModel()
        self._data = new_data
        self.endResetModel()

    def get_payroll_at_row(self, row: int) -> Optional[PayrollEntity]:
        if 0 <= row < len(self._data):
            return self._data[row]
        return None


class ProcessPayrollUI(QWidget):
    payroll_processed = pyqtSignal()

    def __init__(self, employee_manager: EmployeeManager, payroll_manager: PayrollManager, parent=None):
        super().__init__(parent)
        self.employee_manager = employee_manager
        self.payroll_manager = payroll_manager
        self._init_ui()
        self.load_employees()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)

        form_box = QGroupBox("Generate payroll for employees", self)
        form = QFormLayout(form_box)
        self.employee_combo = QComboBox(form_box)

        self.period_start_edit = QDateEdit(form_box)
        self.period_end_edit = QDateEdit(form_box)
        for edit in (self.period_start_edit, self.period_end_edit):
            edit.setCalendarPopup(True)
            edit.setDisplayFormat("yyyy-MM-dd")
        self._reset_pay_period()

        self.process_button = QPushButton("Process Payroll", form_box)
        self.process_button.clicked.connect(self._process_payroll)

        form.addRow("Select Employee:", self.employee_combo)
        form.addRow("Pay Period Start:", self.period_start_edit)
        form.addRow("Pay Period End:", self.period_end_edit)
        form.addRow("", self.process_button)
        main_layout.addWidget(form_box)

        self.empty_label = QLabel("No active employees found. You need to have active employees "
                                  "before you can process payroll.", self)
        self.empty_label.setWordWrap(True)
        main_layout.addWidget(self.empty_label)

        self.result_label = QLabel("", self)
        self.result_label.setWordWrap(True)
        main_layout.addWidget(self.result_label)
        main_layout.addStretch()

    def _reset_pay_period(self):
        today = date.today()
        first_day, last_day = month_bounds(today.year, today.month)
        self.period_start_edit.setDate(to_qdate(first_day))
        self.period_end_edit.setDate(to_qdate(last_day))

    def load_employees(self):
        self.employee_combo.clear()
        self.employee_combo.addItem("Select an employee", None)
        try:
            employees = self.employee_manager.get_active_employees()
        except Exception as e:
            logger.error(f"Error loading employees: {e}", exc_info=True)
            QMessageBox.critical(self, "Load Error", f"Failed to load employees: {e}")
            return
        for emp in employees:
            self.employee_combo.addItem(f"{emp.full_name} - {emp.position}", emp.id)
        has_employees = bool(employees)
        self.empty_label.setVisible(not has_employees)
        self.process_button.setEnabled(has_employees)

    def _process_payroll(self):
        try:
            employee_id = validate_employee_selected(self.employee_combo.currentData())
            start, end = validate_pay_period(from_qdate(self.period_start_edit.date()),
                                             from_qdate(self.period_end_edit.date()))
        except ValidationError as ve:
            QMessageBox.warning(self, "Invalid Input", str(ve))
            return

        try:
            payroll = self.payroll_manager.process_payroll(employee_id, start, end)
        except NotFoundError as nfe:
            QMessageBox.warning(self, "Not Found", str(nfe))
            self.load_employees()
            return
        except Exception as e:
            logger.error(f"Error processing payroll: {e}", exc_info=True)
            QMessageBox.critical(self, "Error", f"Failed to process payroll: {e}")
            return

        self.result_label.setText(
            f"Payroll processed for {payroll.employee_name}: base {_money(payroll.base_amount)}, "
            f"taxes {_money(payroll.taxes)}, deductions {_money(payroll.deductions)}, "
            f"net {_money(payroll.net_amount)}.")
        self.employee_combo.setCurrentIndex(0)
        self.payroll_processed.emit()


class PayrollHistoryUI(QWidget):
    payrolls_changed = pyqtSignal()

    def __init__(self, payroll_manager: PayrollManager, parent=None):
        super().__init__(parent)
        self.payroll_manager = payroll_manager
        self.table_model = PayrollTableModel()
        self._init_ui()
        self.load_payrolls()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)

        filter_layout = QHBoxLayout()
        self.search_edit = QLineEdit(self)
        self.search_edit.setPlaceholderText("Search by employee name or payroll ID...")
        self.search_edit.textChanged.connect(self.load_payrolls)
        self.status_filter_combo = QComboBox(self)
        self.status_filter_combo.addItem("All Statuses", None)
        for status in PayrollStatus:
            self.status_filter_combo.addItem(status.value.capitalize(), status)
        self.status_filter_combo.currentIndexChanged.connect(self.load_payrolls)
        filter_layout.addWidget(self.search_edit)
        filter_layout.addWidget(self.status_filter_combo)
        main_layout.addLayout(filter_layout)

        self.table_view = QTableView(self)
        self.table_view.setModel(self.table_model)
        self.table_view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        header = self.table_view.horizontalHeader()
        if header:
            header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
            header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        main_layout.addWidget(self.table_view)

        button_layout = QHBoxLayout()
        self.delete_button = QPushButton("Delete Record", self)
        self.refresh_button = QPushButton("Refresh", self)
        self.delete_button.clicked.connect(self._delete_selected_payroll)
        self.refresh_button.clicked.connect(self.load_payrolls)
        button_layout.addWidget(self.delete_button)
        button_layout.addStretch()
        button_layout.addWidget(self.refresh_button)
        main_layout.addLayout(button_layout)

    def load_payrolls(self):
        try:
            payrolls = self.payroll_manager.search_payrolls(self.search_edit.text(),
                                                            status=self.status_filter_combo.currentData())
        except Exception as e:
            logger.error(f"Error loading payroll records: {e}", exc_info=True)
            QMessageBox.critical(self, "Load Error", f"Failed to load payroll records: {e}")
            return
        self.table_model.update_data(payrolls)

    def _delete_selected_payroll(self):
        selected = self.table_model.get_payroll_at_row(self.table_view.currentIndex().row())
        if not selected:
            QMessageBox.information(self, "No Selection", "Please select a payroll record to delete.")
            return
        reply = QMessageBox.question(self, "Confirm Delete",
                                     f"Delete payroll record for '{selected.employee_name}' "
                                     f"({to_display_str(selected.pay_period_start)})?",
                                     QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No, # type: ignore
                                     QMessageBox.StandardButton.No)
        if reply != QMessageBox.StandardButton.Yes:
            return
        if self.payroll_manager.delete_payroll(selected.id): # type: ignore
            self.load_payrolls()
            self.payrolls_changed.emit()
        else:
            QMessageBox.critical(self, "Error", "Failed to delete payroll record. See the log for details.")
