# Streamlit entry point: streamlit run ui/streamlit_app.py
from main_content import run_main

run_main()
