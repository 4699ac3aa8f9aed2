# run_forecast.py

import sys
from pathlib import Path

# --- 1. 路径修复 ---
# Lets the script run from a plain checkout (no pip install)
current_dir = Path(__file__).resolve().parent
if str(current_dir) not in sys.path:
    sys.path.insert(0, str(current_dir))

try:
    from gdpforecast.pipeline.run_gdp_forecast import main
except ImportError as e:
    print("❌ 错误: 找不到 gdpforecast 包。")
    print("请确保 'run_forecast.py' 放在项目根目录下。")
    print(f"当前路径: {current_dir}")
    raise e


if __name__ == "__main__":
    # e.g. python run_forecast.py --data data/macro_quarterly.csv --walk-forward
    sys.exit(main())
