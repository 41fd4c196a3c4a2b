"""Enumerations shared between deployment runners and the control plane."""