# paysync/presentation/custom_widgets.py

from PyQt5.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget, QHBoxLayout, QProgressBar
from PyQt5.QtCore import Qt
from typing import Optional


class StatCard(QFrame):
    """A dashboard tile: title, large value and an optional caption."""

    def __init__(self, title: str, value: str = "-", description: Optional[str] = None, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setMinimumSize(180, 100)

        layout = QVBoxLayout(self)
        self.title_label = QLabel(title, self)
        self.title_label.setStyleSheet("color: gray;")
        self.value_label = QLabel(value, self)
        self.value_label.setStyleSheet("font-weight: bold; font-size: 22px;")
        self.description_label = QLabel(description or "", self)
        self.description_label.setStyleSheet("color: gray; font-size: 11px;")
        self.description_label.setVisible(bool(description))

        layout.addWidget(self.title_label)
        layout.addWidget(self.value_label)
        layout.addWidget(self.description_label)
        layout.addStretch()

    def set_value(self, value: str):
        self.value_label.setText(value)


class DepartmentBar(QWidget):
    """One department row of the dashboard: name, share bar and head count."""

    def __init__(self, name: str, count: int, total: int, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.name_label = QLabel(name, self)
        self.bar = QProgressBar(self)
        self.bar.setTextVisible(False)
        self.bar.setMaximumHeight(8)
        self.bar.setRange(0, max(total, 1))
        self.bar.setValue(count)
        self.count_label = QLabel(str(count), self)
        self.count_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        layout.addWidget(self.name_label, 2)
        layout.addWidget(self.bar, 3)
        layout.addWidget(self.count_label)
