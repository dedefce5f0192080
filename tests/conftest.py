import os
import sys

import matplotlib

matplotlib.use('Agg')

module_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if module_path not in sys.path:
    sys.path.insert(0, module_path)
