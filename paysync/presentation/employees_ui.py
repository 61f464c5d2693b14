# paysync/presentation/employees_ui.py

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QTableView, QPushButton,
                             QHBoxLayout, QMessageBox, QDialog, QLineEdit, QComboBox,
                             QFormLayout, QDialogButtonBox, QAbstractItemView,
                             QDoubleSpinBox, QHeaderView, QCheckBox, QDateEdit)
from PyQt5.QtCore import Qt, QAbstractTableModel, QVariant, QModelIndex, QDate, pyqtSignal
from PyQt5.QtGui import QColor

from typing import List, Optional, Any, Dict

from paysync.business_logic.entities.employee_entity import EmployeeEntity
from paysync.business_logic.employee_manager import EmployeeManager
from paysync.config import CURRENCY_SYMBOL
from paysync.constants import EmployeeStatus
from paysync.exceptions import NotFoundError, ValidationError
from paysync.utils.date_utils import to_display_str, from_qdate, to_qdate
from paysync.utils.validators import validate_employee_form
import logging

logger = logging.getLogger(__name__)

# --- Custom Table Model for Employees ---
class EmployeeTableModel(QAbstractTableModel):
    def __init__(self, data: Optional[List[EmployeeEntity]] = None, parent=None):
        super().__init__(parent)
        self._data: List[EmployeeEntity] = data if data is not None else []
        self._headers = ["Name", "Email", "Position", "Department", "Salary", "Hire Date", "Status"]

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self._data)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self._headers)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return QVariant()

        row = index.row()
        col = index.column()
        if not (0 <= row < len(self._data)):
            return QVariant()
        employee = self._data[row]

        if role == Qt.ItemDataRole.DisplayRole:
            if col == 0:
                return employee.full_name
            elif col == 1:
                return employee.email
            elif col == 2:
                return employee.position
            elif col == 3:
                return employee.department
            elif col == 4:
                return f"{CURRENCY_SYMBOL}{employee.salary_amount:,.2f}"
            elif col == 5:
                return to_display_str(employee.hire_date)
            elif col == 6:
                return "Active" if employee.is_active else "Inactive"

        elif role == Qt.ItemDataRole.TextAlignmentRole:
            if col == 4: # Salary
                return Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            if col in (5, 6):
                return Qt.AlignmentFlag.AlignCenter | Qt.AlignmentFlag.AlignVCenter
            return Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter

        elif role == Qt.ItemDataRole.ForegroundRole:
            if not employee.is_active:
                return QColor(Qt.GlobalColor.gray)

        return QVariant()

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if orientation == Qt.Orientation.Horizontal and role == Qt.ItemDataRole.DisplayRole:
            if 0 <= section < len(self._headers):
                return self._headers[section]
        return QVariant()

    def update_data(self, new_data: List[EmployeeEntity]):
        logger.debug(f"Updating employee table model with {len(new_data)} rows.")
        self.beginResetModel()
        self._data = new_data
        self.endResetModel()

    def get_employee_at_row(self, row: int) -> Optional[EmployeeEntity]:
        if 0 <= row < len(self._data):
            return self._data[row]
        return None

# --- Add/Edit Employee Dialog ---
class EmployeeDialog(QDialog):
    def __init__(self, employee: Optional[EmployeeEntity] = None, parent=None):
        super().__init__(parent)
        self.employee = employee
        is_edit_mode = self.employee is not None

        self.setWindowTitle("Add New Employee" if not is_edit_mode else f"Edit Employee: {self.employee.full_name}") # type: ignore
        self.setMinimumWidth(420)

        layout = QFormLayout(self)

        self.first_name_edit = QLineEdit(self)
        self.last_name_edit = QLineEdit(self)
        self.email_edit = QLineEdit(self)
        self.position_edit = QLineEdit(self)
        self.department_edit = QLineEdit(self)
        self.salary_spinbox = QDoubleSpinBox(self)
        self.hire_date_edit = QDateEdit(self)
        self.hire_date_edit.setCalendarPopup(True)
        self.hire_date_edit.setDisplayFormat("yyyy-MM-dd")
        self.status_combo = QComboBox(self)
        for status in EmployeeStatus:
            self.status_combo.addItem(status.value.capitalize(), status)
        self.bank_account_edit = QLineEdit(self)
        self.tax_id_edit = QLineEdit(self)

        self.salary_spinbox.setDecimals(2)
        self.salary_spinbox.setMinimum(0.00)
        self.salary_spinbox.setMaximum(999999999.99)
        self.salary_spinbox.setGroupSeparatorShown(True)
        self.salary_spinbox.setPrefix(CURRENCY_SYMBOL)

        if is_edit_mode and self.employee:
            emp = self.employee
            self.first_name_edit.setText(emp.first_name)
            self.last_name_edit.setText(emp.last_name)
            self.email_edit.setText(emp.email)
            self.position_edit.setText(emp.position)
            self.department_edit.setText(emp.department)
            self.salary_spinbox.setValue(emp.salary_amount)
            self.hire_date_edit.setDate(to_qdate(emp.hire_date))
            self.status_combo.setCurrentIndex(self.status_combo.findData(emp.status))
            self.bank_account_edit.setText(emp.bank_account or "")
            self.tax_id_edit.setText(emp.tax_id or "")
        else:
            self.hire_date_edit.setDate(QDate.currentDate())
            self.status_combo.setCurrentIndex(self.status_combo.findData(EmployeeStatus.ACTIVE))

        layout.addRow("First Name:", self.first_name_edit)
        layout.addRow("Last Name:", self.last_name_edit)
        layout.addRow("Email:", self.email_edit)
        layout.addRow("Position:", self.position_edit)
        layout.addRow("Department:", self.department_edit)
        layout.addRow("Annual Salary:", self.salary_spinbox)
        layout.addRow("Hire Date:", self.hire_date_edit)
        layout.addRow("Status:", self.status_combo)
        layout.addRow("Bank Account (Optional):", self.bank_account_edit)
        layout.addRow("Tax ID (Optional):", self.tax_id_edit)

        buttons = QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        self.button_box = QDialogButtonBox(buttons, Qt.Orientation.Horizontal, self) # type: ignore
        ok_button = self.button_box.button(QDialogButtonBox.StandardButton.Ok)
        if ok_button: ok_button.setText("Update Employee" if is_edit_mode else "Add Employee")
        layout.addWidget(self.button_box)

        self.button_box.accepted.connect(self._on_accept)
        self.button_box.rejected.connect(self.reject)
        self._cleaned_data: Optional[Dict[str, Any]] = None

    def _raw_form_data(self) -> Dict[str, Any]:
        return {
            "first_name": self.first_name_edit.text(),
            "last_name": self.last_name_edit.text(),
            "email": self.email_edit.text(),
            "position": self.position_edit.text(),
            "department": self.department_edit.text(),
            "salary_amount": self.salary_spinbox.value(),
            "hire_date": from_qdate(self.hire_date_edit.date()),
            "status": self.status_combo.currentData(),
            "bank_account": self.bank_account_edit.text(),
            "tax_id": self.tax_id_edit.text(),
        }

    def _on_accept(self):
        try:
            self._cleaned_data = validate_employee_form(self._raw_form_data())
        except ValidationError as ve:
            details = "\n".join(ve.field_errors.values())
            QMessageBox.warning(self, "Invalid Input", f"{ve}\n\n{details}")
            return
        self.accept()

    def get_data(self) -> Optional[Dict[str, Any]]:
        """Validated form values, available after the dialog was accepted."""
        return self._cleaned_data

# --- Main Employees UI Widget ---
class EmployeesUI(QWidget):
    employees_changed = pyqtSignal()

    def __init__(self, employee_manager: EmployeeManager, parent=None):
        super().__init__(parent)
        self.employee_manager = employee_manager
        self.table_model = EmployeeTableModel()
        self.show_active_employees_only = False
        self._init_ui()
        self.load_employees_data()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)

        self.search_edit = QLineEdit(self)
        self.search_edit.setPlaceholderText("Search employees...")
        self.search_edit.textChanged.connect(self.load_employees_data)

        self.active_filter_checkbox = QCheckBox("Active employees only", self)
        self.active_filter_checkbox.setChecked(self.show_active_employees_only)
        self.active_filter_checkbox.stateChanged.connect(self._on_filter_changed)

        filter_layout = QHBoxLayout()
        filter_layout.addWidget(self.search_edit)
        filter_layout.addWidget(self.active_filter_checkbox)
        main_layout.addLayout(filter_layout)

        self.table_view = QTableView()
        self.table_view.setModel(self.table_model)
        self.table_view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table_view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)

        header = self.table_view.horizontalHeader()
        if header:
            header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
            header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch) # Name column
        main_layout.addWidget(self.table_view)

        button_layout = QHBoxLayout()
        self.add_button = QPushButton("Add Employee")
        self.edit_button = QPushButton("Edit Employee")
        self.delete_button = QPushButton("Delete Employee")
        self.refresh_button = QPushButton("Refresh")

        self.add_button.clicked.connect(self._open_add_employee_dialog)
        self.edit_button.clicked.connect(self._open_edit_employee_dialog)
        self.delete_button.clicked.connect(self._delete_selected_employee)
        self.refresh_button.clicked.connect(self.load_employees_data)

        button_layout.addWidget(self.add_button)
        button_layout.addWidget(self.edit_button)
        button_layout.addWidget(self.delete_button)
        button_layout.addStretch()
        button_layout.addWidget(self.refresh_button)

        main_layout.addLayout(button_layout)
        self.setLayout(main_layout)
        logger.info("EmployeesUI initialized.")

    def _on_filter_changed(self, state: int):
        self.show_active_employees_only = self.active_filter_checkbox.isChecked()
        self.load_employees_data()

    def load_employees_data(self):
        try:
            employees = self.employee_manager.search_employees(
                self.search_edit.text(), active_only=self.show_active_employees_only)
            self.table_model.update_data(employees)
            logger.debug(f"{len(employees)} employees loaded into table.")
        except Exception as e:
            logger.error(f"Error loading employees: {e}", exc_info=True)
            QMessageBox.critical(self, "Load Error", f"Failed to load employees: {e}")

    def _selected_employee(self) -> Optional[EmployeeEntity]:
        return self.table_model.get_employee_at_row(self.table_view.currentIndex().row())

    def _open_add_employee_dialog(self):
        dialog = EmployeeDialog(parent=self)
        if dialog.exec_() == QDialog.DialogCode.Accepted:
            data = dialog.get_data()
            if data:
                try:
                    employee = self.employee_manager.create_employee(**data)
                    QMessageBox.information(self, "Success", f"Employee '{employee.full_name}' added successfully.")
                    self.load_employees_data()
                    self.employees_changed.emit()
                except Exception as e:
                    logger.error(f"Error adding employee: {e}", exc_info=True)
                    QMessageBox.critical(self, "Error", f"Failed to add employee: {e}")

    def _open_edit_employee_dialog(self):
        selected = self._selected_employee()
        if not selected:
            QMessageBox.information(self, "No Selection", "Please select an employee to edit.")
            return

        dialog = EmployeeDialog(employee=selected, parent=self)
        if dialog.exec_() == QDialog.DialogCode.Accepted:
            data = dialog.get_data()
            if data:
                # None means "unchanged" to the manager; an emptied optional field must be cleared
                data["bank_account"] = data.get("bank_account") or ""
                data["tax_id"] = data.get("tax_id") or ""
                try:
                    employee = self.employee_manager.update_employee(selected.id, **data) # type: ignore
                    QMessageBox.information(self, "Success", f"Employee '{employee.full_name}' updated successfully.")
                    self.load_employees_data()
                    self.employees_changed.emit()
                except NotFoundError as nfe:
                    QMessageBox.warning(self, "Not Found", str(nfe))
                    self.load_employees_data()
                except Exception as e:
                    logger.error(f"Error editing employee: {e}", exc_info=True)
                    QMessageBox.critical(self, "Error", f"Failed to update employee: {e}")

    def _delete_selected_employee(self):
        selected = self._selected_employee()
        if not selected:
            QMessageBox.information(self, "No Selection", "Please select an employee to delete.")
            return

        reply = QMessageBox.question(self, "Confirm Delete",
                                     f"Are you sure you want to delete employee '{selected.full_name}'?",
                                     QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No, # type: ignore
                                     QMessageBox.StandardButton.No)
        if reply != QMessageBox.StandardButton.Yes:
            return

        if self.employee_manager.delete_employee(selected.id): # type: ignore
            QMessageBox.information(self, "Success", f"Employee '{selected.full_name}' deleted successfully.")
            self.load_employees_data()
            self.employees_changed.emit()
        else:
            QMessageBox.critical(self, "Error", "Failed to delete employee. See the log for details.")
