# CortexHub Application
