# -*- coding: utf-8 -*-

################################################################################
## Form generated from reading UI file 'settingsWindow.ui'
##
## Created by: Qt User Interface Compiler version 6.8.0
##
## WARNING! All changes made in this file will be lost when recompiling UI file!
################################################################################

from PySide6.QtCore import (QCoreApplication, QMetaObject, QRect, Qt)
from PySide6.QtWidgets import (QCheckBox, QDialogButtonBox, QFormLayout,
    QHBoxLayout, QLabel, QLayout, QLineEdit, QPushButton, QSpinBox, QWidget)

class Ui_DialogSettings(object):
    def setupUi(self, DialogSettings):
        if not DialogSettings.objectName():
            DialogSettings.setObjectName(u"DialogSettings")
        DialogSettings.setWindowModality(Qt.WindowModality.ApplicationModal)
        DialogSettings.resize(441, 209)
        DialogSettings.setModal(True)
        self.buttonBox = QDialogButtonBox(DialogSettings)
        self.buttonBox.setObjectName(u"buttonBox")
        self.buttonBox.setGeometry(QRect(40, 170, 391, 32))
        self.buttonBox.setOrientation(Qt.Orientation.Horizontal)
        self.buttonBox.setStandardButtons(QDialogButtonBox.StandardButton.Cancel|QDialogButtonBox.StandardButton.Ok)
        self.formLayoutWidget = QWidget(DialogSettings)
        self.formLayoutWidget.setObjectName(u"formLayoutWidget")
        self.formLayoutWidget.setGeometry(QRect(10, 10, 421, 151))
        self.formLayout = QFormLayout(self.formLayoutWidget)
        self.formLayout.setObjectName(u"formLayout")
        self.formLayout.setSizeConstraint(QLayout.SizeConstraint.SetMinAndMaxSize)
        self.formLayout.setContentsMargins(0, 0, 0, 0)
        self.label = QLabel(self.formLayoutWidget)
        self.label.setObjectName(u"label")
        self.label.setAlignment(Qt.AlignmentFlag.AlignRight|Qt.AlignmentFlag.AlignTrailing|Qt.AlignmentFlag.AlignVCenter)

        self.formLayout.setWidget(0, QFormLayout.LabelRole, self.label)

        self.spinBoxFps = QSpinBox(self.formLayoutWidget)
        self.spinBoxFps.setObjectName(u"spinBoxFps")
        self.spinBoxFps.setMinimum(1)
        self.spinBoxFps.setMaximum(120)
        self.spinBoxFps.setValue(30)

        self.formLayout.setWidget(0, QFormLayout.FieldRole, self.spinBoxFps)

        self.label_2 = QLabel(self.formLayoutWidget)
        self.label_2.setObjectName(u"label_2")
        self.label_2.setAlignment(Qt.AlignmentFlag.AlignRight|Qt.AlignmentFlag.AlignTrailing|Qt.AlignmentFlag.AlignVCenter)

        self.formLayout.setWidget(1, QFormLayout.LabelRole, self.label_2)

        self.horizontalLayoutSnapshotDir = QHBoxLayout()
        self.horizontalLayoutSnapshotDir.setObjectName(u"horizontalLayoutSnapshotDir")
        self.lineEditSnapshotDir = QLineEdit(self.formLayoutWidget)
        self.lineEditSnapshotDir.setObjectName(u"lineEditSnapshotDir")

        self.horizontalLayoutSnapshotDir.addWidget(self.lineEditSnapshotDir)

        self.buttonBrowse = QPushButton(self.formLayoutWidget)
        self.buttonBrowse.setObjectName(u"buttonBrowse")

        self.horizontalLayoutSnapshotDir.addWidget(self.buttonBrowse)


        self.formLayout.setLayout(1, QFormLayout.FieldRole, self.horizontalLayoutSnapshotDir)

        self.label_3 = QLabel(self.formLayoutWidget)
        self.label_3.setObjectName(u"label_3")
        self.label_3.setAlignment(Qt.AlignmentFlag.AlignRight|Qt.AlignmentFlag.AlignTrailing|Qt.AlignmentFlag.AlignVCenter)

        self.formLayout.setWidget(2, QFormLayout.LabelRole, self.label_3)

        self.checkBoxRememberRange = QCheckBox(self.formLayoutWidget)
        self.checkBoxRememberRange.setObjectName(u"checkBoxRememberRange")
        self.checkBoxRememberRange.setChecked(True)

        self.formLayout.setWidget(2, QFormLayout.FieldRole, self.checkBoxRememberRange)

        self.label_4 = QLabel(self.formLayoutWidget)
        self.label_4.setObjectName(u"label_4")
        self.label_4.setAlignment(Qt.AlignmentFlag.AlignRight|Qt.AlignmentFlag.AlignTrailing|Qt.AlignmentFlag.AlignVCenter)

        self.formLayout.setWidget(3, QFormLayout.LabelRole, self.label_4)

        self.checkBoxLogConsole = QCheckBox(self.formLayoutWidget)
        self.checkBoxLogConsole.setObjectName(u"checkBoxLogConsole")

        self.formLayout.setWidget(3, QFormLayout.FieldRole, self.checkBoxLogConsole)


        self.retranslateUi(DialogSettings)
        self.buttonBrowse.clicked.connect(DialogSettings.browse_snapshot_dir)

        QMetaObject.connectSlotsByName(DialogSettings)
    # setupUi

    def retranslateUi(self, DialogSettings):
        DialogSettings.setWindowTitle(QCoreApplication.translate("DialogSettings", u"HSV Range Finder Settings", None))
        self.label.setText(QCoreApplication.translate("DialogSettings", u"Frame rate (fps) :", None))
        self.label_2.setText(QCoreApplication.translate("DialogSettings", u"Snapshot folder :", None))
        self.buttonBrowse.setText(QCoreApplication.translate("DialogSettings", u"Browse...", None))
        self.label_3.setText(QCoreApplication.translate("DialogSettings", u"Remember range", None))
        self.checkBoxRememberRange.setText("")
        self.label_4.setText(QCoreApplication.translate("DialogSettings", u"Log to console", None))
        self.checkBoxLogConsole.setText("")
    # retranslateUi

