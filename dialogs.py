from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox


class Dialogs:
    """Modal message boxes parented to the main window."""

    @staticmethod
    def ask_confirmation(parent, action: str) -> bool:
        msg = QMessageBox(parent)
        msg.setIcon(QMessageBox.Question)
        msg.setWindowTitle(f"Confirm {action}")
        msg.setText(f"Are you sure you want to {action}?")
        msg.setStandardButtons(QMessageBox.Yes | QMessageBox.No)
        msg.setDefaultButton(QMessageBox.No)

        msg.setWindowModality(Qt.ApplicationModal)
        return msg.exec() == QMessageBox.Yes


    @staticmethod
    def display_error_message(parent, message: str) -> bool:
        msg = QMessageBox(parent)
        msg.setIcon(QMessageBox.Critical)
        msg.setWindowTitle("Error")
        msg.setText(message)
        msg.setStandardButtons(QMessageBox.Ok)
        msg.setDefaultButton(QMessageBox.Ok)

        msg.setWindowModality(Qt.ApplicationModal)
        return msg.exec() == QMessageBox.Ok
