"""
User interface for TCG Document Lock.
"""

import os
from typing import Optional
from PyQt5.QtWidgets import (
    QMainWindow, QDialog, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QLineEdit, QPushButton, QTableWidget, QTableWidgetItem,
    QMessageBox, QFileDialog, QTextEdit, QDialogButtonBox, QComboBox,
    QApplication, QHeaderView
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap

from .vault import Vault
from .models import StoredItem, ItemCategory, CATEGORY_SPECS
from .exceptions import DocLockError, ItemValidationError
from . import config


def format_date(item: StoredItem) -> str:
    return item.stored_date.strftime(config.DISPLAY_DATE_FORMAT)


class PasswordDialog(QDialog):
    """Sets the password on first launch, unlocks the vault afterwards."""

    def __init__(self, vault: Vault, parent=None):
        super().__init__(parent)
        self.vault = vault
        self.is_first_time = vault.is_first_run
        self.init_ui()

    def init_ui(self):
        """Initialize the user interface."""
        if self.is_first_time:
            self.setWindowTitle(f"Set Password for {config.APP_NAME}")
        else:
            self.setWindowTitle("Enter Password to Unlock")
        self.setMinimumWidth(400)
        self.setModal(True)

        layout = QVBoxLayout()

        title = QLabel(config.APP_NAME)
        title.setAlignment(Qt.AlignCenter)
        font = title.font()
        font.setPointSize(16)
        font.setBold(True)
        title.setFont(font)
        layout.addWidget(title)

        layout.addWidget(QLabel("Password:"))
        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.returnPressed.connect(self.submit)
        layout.addWidget(self.password_input)

        self.submit_button = QPushButton("Set Password" if self.is_first_time else "Unlock")
        self.submit_button.clicked.connect(self.submit)
        layout.addWidget(self.submit_button)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: red")
        layout.addWidget(self.status_label)

        self.setLayout(layout)
        self.password_input.setFocus()

    def submit(self):
        """Set or check the password."""
        password = self.password_input.text()
        try:
            if self.vault.unlock(password):
                self.accept()
                return
            self.status_label.setText("Incorrect password")
        except ValueError as e:
            self.status_label.setText(str(e))
        except DocLockError as e:
            QMessageBox.critical(self, "Error", f"Failed to save password: {e}")
        finally:
            self.password_input.clear()


class AddItemDialog(QDialog):
    """Dialog for adding a new item."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.source_path: Optional[str] = None
        self.source_name = ""
        self.init_ui()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle("Add New Item")
        self.setModal(True)
        self.setMinimumWidth(500)

        layout = QFormLayout()

        self.category_input = QComboBox()
        for category in ItemCategory:
            self.category_input.addItem(CATEGORY_SPECS[category].label, int(category))
        self.category_input.currentIndexChanged.connect(self.category_changed)
        layout.addRow("Select Category:", self.category_input)

        self.title_input = QLineEdit()
        layout.addRow("Title:", self.title_input)

        # File path row (Photo, Document)
        self.file_widget = QWidget()
        file_layout = QHBoxLayout()
        file_layout.setContentsMargins(0, 0, 0, 0)
        self.file_input = QLineEdit()
        self.file_input.setReadOnly(True)
        file_layout.addWidget(self.file_input)
        self.pick_button = QPushButton("Pick File")
        self.pick_button.clicked.connect(self.pick_file)
        file_layout.addWidget(self.pick_button)
        self.file_widget.setLayout(file_layout)

        # Free text row (Text Note)
        self.text_input = QTextEdit()
        self.text_input.setMaximumHeight(120)

        # Single line row (Website, Password)
        self.line_input = QLineEdit()

        self.content_label = QLabel()
        content_box = QVBoxLayout()
        content_box.addWidget(self.file_widget)
        content_box.addWidget(self.text_input)
        content_box.addWidget(self.line_input)
        layout.addRow(self.content_label, content_box)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.validate_and_accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

        self.setLayout(layout)
        self.category_changed()

    @property
    def category(self) -> ItemCategory:
        return ItemCategory(self.category_input.currentData())

    def category_changed(self):
        """Show the content widget that fits the selected category."""
        category = self.category
        spec = CATEGORY_SPECS[category]
        self.content_label.setText(f"{spec.content_label}:")
        self.file_widget.setVisible(spec.requires_file)
        self.text_input.setVisible(category == ItemCategory.TEXT_NOTE)
        self.line_input.setVisible(category in (ItemCategory.WEBSITE, ItemCategory.PASSWORD))
        self.line_input.setEchoMode(
            QLineEdit.Password if category == ItemCategory.PASSWORD else QLineEdit.Normal)
        self.file_input.clear()
        self.text_input.clear()
        self.line_input.clear()
        self.source_path = None
        self.source_name = ""

    def pick_file(self):
        """Let the user choose the file to import."""
        spec = CATEGORY_SPECS[self.category]
        path, _ = QFileDialog.getOpenFileName(self, "Pick File", "", spec.file_filter)
        if path:
            self.source_path = path
            self.source_name = os.path.basename(path)
            self.file_input.setText(path)

    def content(self) -> str:
        category = self.category
        if CATEGORY_SPECS[category].requires_file:
            return self.file_input.text()
        if category == ItemCategory.TEXT_NOTE:
            return self.text_input.toPlainText()
        return self.line_input.text()

    def validate_and_accept(self):
        """Validate input and accept dialog."""
        if not self.title_input.text().strip():
            QMessageBox.warning(self, "Validation Error", "Please enter a title")
            return
        error = CATEGORY_SPECS[self.category].validate(self.content())
        if error:
            QMessageBox.warning(self, "Validation Error", error)
            return
        self.accept()


class ItemDetailDialog(QDialog):
    """Read-only view of one item."""

    def __init__(self, vault: Vault, item: StoredItem, parent=None):
        super().__init__(parent)
        self.vault = vault
        self.item = item
        self.init_ui()

    def init_ui(self):
        self.setWindowTitle(self.item.title)
        self.setMinimumWidth(500)

        layout = QVBoxLayout()
        header = QLabel(f"<b>{self.item.label}</b><br>Stored on {format_date(self.item)}")
        layout.addWidget(header)

        if self.item.requires_file and not self.vault.attachment_exists(self.item):
            layout.addWidget(QLabel(f"{self.item.label} file not found."))
        elif self.item.category == ItemCategory.PHOTO:
            image = QLabel()
            image.setPixmap(QPixmap(self.item.content).scaledToWidth(480, Qt.SmoothTransformation))
            layout.addWidget(image)
        else:
            text = f"Document path:\n{self.item.content}" if self.item.requires_file else self.item.content
            content = QLabel(text)
            content.setWordWrap(True)
            content.setTextInteractionFlags(Qt.TextSelectableByMouse)
            if self.item.category == ItemCategory.PASSWORD:
                content.setStyleSheet("font-family: monospace")
            layout.addWidget(content)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.setLayout(layout)


class SummaryDialog(QDialog):
    """Per-category item counts."""

    def __init__(self, vault: Vault, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Summary of Stored Items")
        layout = QFormLayout()
        for category, count in vault.tally().items():
            layout.addRow(f"{CATEGORY_SPECS[category].label}:", QLabel(str(count)))
        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)
        self.setLayout(layout)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, vault: Vault):
        super().__init__()
        self.vault = vault
        self.init_ui()
        self.load_items()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(config.APP_TITLE_PREFIX)
        self.resize(*config.MAIN_WINDOW_SIZE)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout()
        central_widget.setLayout(layout)

        toolbar_layout = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search stored items...")
        self.search_input.textChanged.connect(self.load_items)
        toolbar_layout.addWidget(self.search_input)

        self.summary_button = QPushButton("Summary")
        self.summary_button.clicked.connect(self.show_summary)
        toolbar_layout.addWidget(self.summary_button)

        self.add_button = QPushButton("Add New Item")
        self.add_button.clicked.connect(self.add_item)
        toolbar_layout.addWidget(self.add_button)
        layout.addLayout(toolbar_layout)

        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Title", "Category", "Stored", "Content"])
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.Stretch)
        self.table.cellDoubleClicked.connect(self.open_item)
        layout.addWidget(self.table)

        self.delete_button = QPushButton("Delete")
        self.delete_button.clicked.connect(self.delete_selected)
        layout.addWidget(self.delete_button)

        self.empty_label = QLabel()
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color: grey; font-size: 18px")
        layout.addWidget(self.empty_label)

        self.count_label = QLabel("Items: 0")
        self.statusBar().addPermanentWidget(self.count_label)

    def load_items(self):
        """Fill the table with the items matching the search box."""
        query = self.search_input.text()
        items = self.vault.search(query)
        self.table.setRowCount(0)
        for item in items:
            self.add_item_to_table(item)

        if items:
            self.empty_label.setText("")
        elif query:
            self.empty_label.setText("No items match your search.")
        else:
            self.empty_label.setText("No items stored yet.\nClick Add New Item to add.")
        self.count_label.setText(f"Items: {len(self.vault.items)}")

    def add_item_to_table(self, item: StoredItem):
        row = self.table.rowCount()
        self.table.insertRow(row)

        title_item = QTableWidgetItem(item.title)
        title_item.setData(Qt.UserRole, item.id)
        self.table.setItem(row, 0, title_item)
        self.table.setItem(row, 1, QTableWidgetItem(item.label))
        self.table.setItem(row, 2, QTableWidgetItem(format_date(item)))

        if item.category == ItemCategory.PASSWORD:
            preview = config.TABLE_PASSWORD_HIDDEN_TEXT
        elif len(item.content) > config.CONTENT_PREVIEW_LENGTH:
            preview = item.content[:config.CONTENT_PREVIEW_LENGTH] + "..."
        else:
            preview = item.content
        self.table.setItem(row, 3, QTableWidgetItem(preview))

    def _item_at(self, row: int) -> Optional[StoredItem]:
        cell = self.table.item(row, 0)
        if cell is None:
            return None
        return self.vault.catalog.get(cell.data(Qt.UserRole))

    def open_item(self, row: int, _column: int = 0):
        item = self._item_at(row)
        if item:
            ItemDetailDialog(self.vault, item, self).exec_()

    def show_summary(self):
        SummaryDialog(self.vault, self).exec_()

    def add_item(self):
        """Add a new item."""
        dialog = AddItemDialog(parent=self)
        if not dialog.exec_():
            return
        try:
            self.vault.create_item(
                dialog.title_input.text(),
                dialog.category,
                content=dialog.content(),
                source_path=dialog.source_path,
                source_name=dialog.source_name,
            )
        except ItemValidationError as e:
            QMessageBox.warning(self, "Validation Error", str(e))
            return
        except DocLockError as e:
            QMessageBox.critical(self, "Error", f"Failed to save item: {e}")
            # a failed catalog write still leaves the item in memory
            self.load_items()
            return
        self.load_items()
        self.statusBar().showMessage("Item added", 2000)

    def delete_selected(self):
        """Delete the selected item after confirmation."""
        item = self._item_at(self.table.currentRow())
        if item is None:
            return
        reply = QMessageBox.question(
            self, "Delete Item",
            f'Are you sure you want to delete "{item.title}"?',
            QMessageBox.Yes | QMessageBox.No
        )
        if reply != QMessageBox.Yes:
            return
        try:
            self.vault.delete_item(item.id)
        except DocLockError as e:
            QMessageBox.critical(self, "Error", f"Failed to delete item: {e}")
            self.load_items()
            return
        self.load_items()
        self.statusBar().showMessage("Item deleted", 2000)


def run_app(vault: Vault) -> int:
    """Show the password gate, then the main window."""
    app = QApplication.instance()
    dialog = PasswordDialog(vault)
    if not dialog.exec_():
        return 0
    window = MainWindow(vault)
    window.show()
    return app.exec_()
