# -*- coding: utf-8 -*-

################################################################################
## Form generated from reading UI file 'mainWindow.ui'
##
## Created by: Qt User Interface Compiler version 6.8.0
##
## WARNING! All changes made in this file will be lost when recompiling UI file!
################################################################################

from PySide6.QtCore import (QCoreApplication, QMetaObject, QSize, Qt)
from PySide6.QtWidgets import (QCheckBox, QGridLayout, QGroupBox, QHBoxLayout,
    QLabel, QPushButton, QSizePolicy, QSlider, QSpacerItem, QSpinBox,
    QStatusBar, QVBoxLayout, QWidget)

class Ui_MainWindow(object):
    def setupUi(self, MainWindow):
        if not MainWindow.objectName():
            MainWindow.setObjectName(u"MainWindow")
        MainWindow.resize(1300, 760)
        self.centralwidget = QWidget(MainWindow)
        self.centralwidget.setObjectName(u"centralwidget")
        self.verticalLayout = QVBoxLayout(self.centralwidget)
        self.verticalLayout.setObjectName(u"verticalLayout")
        self.horizontalLayoutFrames = QHBoxLayout()
        self.horizontalLayoutFrames.setObjectName(u"horizontalLayoutFrames")
        self.groupBoxRaw = QGroupBox(self.centralwidget)
        self.groupBoxRaw.setObjectName(u"groupBoxRaw")
        self.verticalLayoutRaw = QVBoxLayout(self.groupBoxRaw)
        self.verticalLayoutRaw.setObjectName(u"verticalLayoutRaw")
        self.label_raw_frame = QLabel(self.groupBoxRaw)
        self.label_raw_frame.setObjectName(u"label_raw_frame")
        sizePolicy = QSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        sizePolicy.setHorizontalStretch(0)
        sizePolicy.setVerticalStretch(0)
        sizePolicy.setHeightForWidth(self.label_raw_frame.sizePolicy().hasHeightForWidth())
        self.label_raw_frame.setSizePolicy(sizePolicy)
        self.label_raw_frame.setMinimumSize(QSize(320, 240))
        self.label_raw_frame.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.verticalLayoutRaw.addWidget(self.label_raw_frame)


        self.horizontalLayoutFrames.addWidget(self.groupBoxRaw)

        self.groupBoxProc = QGroupBox(self.centralwidget)
        self.groupBoxProc.setObjectName(u"groupBoxProc")
        self.verticalLayoutProc = QVBoxLayout(self.groupBoxProc)
        self.verticalLayoutProc.setObjectName(u"verticalLayoutProc")
        self.label_proc_frame = QLabel(self.groupBoxProc)
        self.label_proc_frame.setObjectName(u"label_proc_frame")
        sizePolicy = QSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        sizePolicy.setHorizontalStretch(0)
        sizePolicy.setVerticalStretch(0)
        sizePolicy.setHeightForWidth(self.label_proc_frame.sizePolicy().hasHeightForWidth())
        self.label_proc_frame.setSizePolicy(sizePolicy)
        self.label_proc_frame.setMinimumSize(QSize(320, 240))
        self.label_proc_frame.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.verticalLayoutProc.addWidget(self.label_proc_frame)


        self.horizontalLayoutFrames.addWidget(self.groupBoxProc)


        self.verticalLayout.addLayout(self.horizontalLayoutFrames)

        self.gridLayoutRange = QGridLayout()
        self.gridLayoutRange.setObjectName(u"gridLayoutRange")
        self.label_H_low = QLabel(self.centralwidget)
        self.label_H_low.setObjectName(u"label_H_low")

        self.gridLayoutRange.addWidget(self.label_H_low, 0, 0, 1, 1)

        self.horizontalSlider_H_low = QSlider(self.centralwidget)
        self.horizontalSlider_H_low.setObjectName(u"horizontalSlider_H_low")
        self.horizontalSlider_H_low.setMaximum(255)
        self.horizontalSlider_H_low.setOrientation(Qt.Orientation.Horizontal)

        self.gridLayoutRange.addWidget(self.horizontalSlider_H_low, 0, 1, 1, 1)

        self.spinBox_H_low = QSpinBox(self.centralwidget)
        self.spinBox_H_low.setObjectName(u"spinBox_H_low")
        self.spinBox_H_low.setMaximum(255)

        self.gridLayoutRange.addWidget(self.spinBox_H_low, 0, 2, 1, 1)

        self.label_H_high = QLabel(self.centralwidget)
        self.label_H_high.setObjectName(u"label_H_high")

        self.gridLayoutRange.addWidget(self.label_H_high, 0, 3, 1, 1)

        self.horizontalSlider_H_high = QSlider(self.centralwidget)
        self.horizontalSlider_H_high.setObjectName(u"horizontalSlider_H_high")
        self.horizontalSlider_H_high.setMaximum(255)
        self.horizontalSlider_H_high.setValue(255)
        self.horizontalSlider_H_high.setOrientation(Qt.Orientation.Horizontal)

        self.gridLayoutRange.addWidget(self.horizontalSlider_H_high, 0, 4, 1, 1)

        self.spinBox_H_high = QSpinBox(self.centralwidget)
        self.spinBox_H_high.setObjectName(u"spinBox_H_high")
        self.spinBox_H_high.setMaximum(255)
        self.spinBox_H_high.setValue(255)

        self.gridLayoutRange.addWidget(self.spinBox_H_high, 0, 5, 1, 1)

        self.label_S_low = QLabel(self.centralwidget)
        self.label_S_low.setObjectName(u"label_S_low")

        self.gridLayoutRange.addWidget(self.label_S_low, 1, 0, 1, 1)

        self.horizontalSlider_S_low = QSlider(self.centralwidget)
        self.horizontalSlider_S_low.setObjectName(u"horizontalSlider_S_low")
        self.horizontalSlider_S_low.setMaximum(255)
        self.horizontalSlider_S_low.setOrientation(Qt.Orientation.Horizontal)

        self.gridLayoutRange.addWidget(self.horizontalSlider_S_low, 1, 1, 1, 1)

        self.spinBox_S_low = QSpinBox(self.centralwidget)
        self.spinBox_S_low.setObjectName(u"spinBox_S_low")
        self.spinBox_S_low.setMaximum(255)

        self.gridLayoutRange.addWidget(self.spinBox_S_low, 1, 2, 1, 1)

        self.label_S_high = QLabel(self.centralwidget)
        self.label_S_high.setObjectName(u"label_S_high")

        self.gridLayoutRange.addWidget(self.label_S_high, 1, 3, 1, 1)

        self.horizontalSlider_S_high = QSlider(self.centralwidget)
        self.horizontalSlider_S_high.setObjectName(u"horizontalSlider_S_high")
        self.horizontalSlider_S_high.setMaximum(255)
        self.horizontalSlider_S_high.setValue(255)
        self.horizontalSlider_S_high.setOrientation(Qt.Orientation.Horizontal)

        self.gridLayoutRange.addWidget(self.horizontalSlider_S_high, 1, 4, 1, 1)

        self.spinBox_S_high = QSpinBox(self.centralwidget)
        self.spinBox_S_high.setObjectName(u"spinBox_S_high")
        self.spinBox_S_high.setMaximum(255)
        self.spinBox_S_high.setValue(255)

        self.gridLayoutRange.addWidget(self.spinBox_S_high, 1, 5, 1, 1)

        self.label_V_low = QLabel(self.centralwidget)
        self.label_V_low.setObjectName(u"label_V_low")

        self.gridLayoutRange.addWidget(self.label_V_low, 2, 0, 1, 1)

        self.horizontalSlider_V_low = QSlider(self.centralwidget)
        self.horizontalSlider_V_low.setObjectName(u"horizontalSlider_V_low")
        self.horizontalSlider_V_low.setMaximum(255)
        self.horizontalSlider_V_low.setOrientation(Qt.Orientation.Horizontal)

        self.gridLayoutRange.addWidget(self.horizontalSlider_V_low, 2, 1, 1, 1)

        self.spinBox_V_low = QSpinBox(self.centralwidget)
        self.spinBox_V_low.setObjectName(u"spinBox_V_low")
        self.spinBox_V_low.setMaximum(255)

        self.gridLayoutRange.addWidget(self.spinBox_V_low, 2, 2, 1, 1)

        self.label_V_high = QLabel(self.centralwidget)
        self.label_V_high.setObjectName(u"label_V_high")

        self.gridLayoutRange.addWidget(self.label_V_high, 2, 3, 1, 1)

        self.horizontalSlider_V_high = QSlider(self.centralwidget)
        self.horizontalSlider_V_high.setObjectName(u"horizontalSlider_V_high")
        self.horizontalSlider_V_high.setMaximum(255)
        self.horizontalSlider_V_high.setValue(255)
        self.horizontalSlider_V_high.setOrientation(Qt.Orientation.Horizontal)

        self.gridLayoutRange.addWidget(self.horizontalSlider_V_high, 2, 4, 1, 1)

        self.spinBox_V_high = QSpinBox(self.centralwidget)
        self.spinBox_V_high.setObjectName(u"spinBox_V_high")
        self.spinBox_V_high.setMaximum(255)
        self.spinBox_V_high.setValue(255)

        self.gridLayoutRange.addWidget(self.spinBox_V_high, 2, 5, 1, 1)


        self.verticalLayout.addLayout(self.gridLayoutRange)

        self.labelRange = QLabel(self.centralwidget)
        self.labelRange.setObjectName(u"labelRange")
        self.labelRange.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        self.verticalLayout.addWidget(self.labelRange)

        self.horizontalLayoutControls = QHBoxLayout()
        self.horizontalLayoutControls.setObjectName(u"horizontalLayoutControls")
        self.labelCamNo = QLabel(self.centralwidget)
        self.labelCamNo.setObjectName(u"labelCamNo")

        self.horizontalLayoutControls.addWidget(self.labelCamNo)

        self.spinBoxCamNo = QSpinBox(self.centralwidget)
        self.spinBoxCamNo.setObjectName(u"spinBoxCamNo")
        self.spinBoxCamNo.setMaximum(99)
        self.spinBoxCamNo.setValue(1)

        self.horizontalLayoutControls.addWidget(self.spinBoxCamNo)

        self.buttonStartCapture = QPushButton(self.centralwidget)
        self.buttonStartCapture.setObjectName(u"buttonStartCapture")

        self.horizontalLayoutControls.addWidget(self.buttonStartCapture)

        self.buttonStopCapture = QPushButton(self.centralwidget)
        self.buttonStopCapture.setObjectName(u"buttonStopCapture")

        self.horizontalLayoutControls.addWidget(self.buttonStopCapture)

        self.checkBoxBinaryOut = QCheckBox(self.centralwidget)
        self.checkBoxBinaryOut.setObjectName(u"checkBoxBinaryOut")

        self.horizontalLayoutControls.addWidget(self.checkBoxBinaryOut)

        self.horizontalSpacer = QSpacerItem(40, 20, QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Minimum)

        self.horizontalLayoutControls.addItem(self.horizontalSpacer)

        self.buttonResetRange = QPushButton(self.centralwidget)
        self.buttonResetRange.setObjectName(u"buttonResetRange")

        self.horizontalLayoutControls.addWidget(self.buttonResetRange)

        self.buttonCopyRange = QPushButton(self.centralwidget)
        self.buttonCopyRange.setObjectName(u"buttonCopyRange")

        self.horizontalLayoutControls.addWidget(self.buttonCopyRange)

        self.buttonSaveSnapshot = QPushButton(self.centralwidget)
        self.buttonSaveSnapshot.setObjectName(u"buttonSaveSnapshot")

        self.horizontalLayoutControls.addWidget(self.buttonSaveSnapshot)

        self.buttonSettings = QPushButton(self.centralwidget)
        self.buttonSettings.setObjectName(u"buttonSettings")

        self.horizontalLayoutControls.addWidget(self.buttonSettings)


        self.verticalLayout.addLayout(self.horizontalLayoutControls)

        MainWindow.setCentralWidget(self.centralwidget)
        self.statusbar = QStatusBar(MainWindow)
        self.statusbar.setObjectName(u"statusbar")
        MainWindow.setStatusBar(self.statusbar)

        self.retranslateUi(MainWindow)
        self.spinBoxCamNo.valueChanged.connect(MainWindow.CamNoChanged)
        self.buttonStartCapture.clicked.connect(MainWindow.StartCapture)
        self.buttonStopCapture.clicked.connect(MainWindow.StopCapture)
        self.checkBoxBinaryOut.toggled.connect(MainWindow.BinaryOutputToggled)
        self.horizontalSlider_H_low.valueChanged.connect(MainWindow.RangeSliderChanged)
        self.spinBox_H_low.valueChanged.connect(MainWindow.RangeSpinChanged)
        self.horizontalSlider_H_high.valueChanged.connect(MainWindow.RangeSliderChanged)
        self.spinBox_H_high.valueChanged.connect(MainWindow.RangeSpinChanged)
        self.horizontalSlider_S_low.valueChanged.connect(MainWindow.RangeSliderChanged)
        self.spinBox_S_low.valueChanged.connect(MainWindow.RangeSpinChanged)
        self.horizontalSlider_S_high.valueChanged.connect(MainWindow.RangeSliderChanged)
        self.spinBox_S_high.valueChanged.connect(MainWindow.RangeSpinChanged)
        self.horizontalSlider_V_low.valueChanged.connect(MainWindow.RangeSliderChanged)
        self.spinBox_V_low.valueChanged.connect(MainWindow.RangeSpinChanged)
        self.horizontalSlider_V_high.valueChanged.connect(MainWindow.RangeSliderChanged)
        self.spinBox_V_high.valueChanged.connect(MainWindow.RangeSpinChanged)
        self.buttonResetRange.clicked.connect(MainWindow.ResetRangeHandler)
        self.buttonCopyRange.clicked.connect(MainWindow.CopyRangeHandler)
        self.buttonSaveSnapshot.clicked.connect(MainWindow.SaveSnapshotHandler)
        self.buttonSettings.clicked.connect(MainWindow.SettingsHandler)

        QMetaObject.connectSlotsByName(MainWindow)
    # setupUi

    def retranslateUi(self, MainWindow):
        MainWindow.setWindowTitle(QCoreApplication.translate("MainWindow", u"HSV Range Finder", None))
        self.groupBoxRaw.setTitle(QCoreApplication.translate("MainWindow", u"Raw frame", None))
        self.label_raw_frame.setText("")
        self.groupBoxProc.setTitle(QCoreApplication.translate("MainWindow", u"Processed frame", None))
        self.label_proc_frame.setText("")
        self.label_H_low.setText(QCoreApplication.translate("MainWindow", u"H low", None))
        self.label_H_high.setText(QCoreApplication.translate("MainWindow", u"H high", None))
        self.label_S_low.setText(QCoreApplication.translate("MainWindow", u"S low", None))
        self.label_S_high.setText(QCoreApplication.translate("MainWindow", u"S high", None))
        self.label_V_low.setText(QCoreApplication.translate("MainWindow", u"V low", None))
        self.label_V_high.setText(QCoreApplication.translate("MainWindow", u"V high", None))
        self.labelRange.setText("")
        self.labelCamNo.setText(QCoreApplication.translate("MainWindow", u"Camera No. :", None))
        self.buttonStartCapture.setText(QCoreApplication.translate("MainWindow", u"Start capture", None))
        self.buttonStopCapture.setText(QCoreApplication.translate("MainWindow", u"Stop capture", None))
        self.checkBoxBinaryOut.setText(QCoreApplication.translate("MainWindow", u"Binary output", None))
        self.buttonResetRange.setText(QCoreApplication.translate("MainWindow", u"Reset range", None))
        self.buttonCopyRange.setText(QCoreApplication.translate("MainWindow", u"Copy range", None))
        self.buttonSaveSnapshot.setText(QCoreApplication.translate("MainWindow", u"Save snapshot", None))
        self.buttonSettings.setText(QCoreApplication.translate("MainWindow", u"Settings...", None))
    # retranslateUi

