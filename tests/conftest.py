import matplotlib

# Tests render figures without a display
matplotlib.use("Agg")
