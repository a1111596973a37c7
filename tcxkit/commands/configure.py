import json
import os

from tcxkit.appconfig import CONFIG_FILENAME, DEFAULT_CONFIG


def run():
    print("Welcome to tcxkit configuration!")
    config = {}

    # Debug mode
    debug_input = input("\nEnable debug mode? (y/N): ").strip().lower()
    config["debug"] = debug_input == "y"

    print("\n--- Files ---")
    data_folder = input(f"Folder holding .tcx files (default: {DEFAULT_CONFIG['data_folder']}): ").strip()
    config["data_folder"] = data_folder or DEFAULT_CONFIG["data_folder"]

    print("\n--- Output ---")
    print("Common table formats: simple, github, grid, plain")
    table_format = input(f"Table format (default: {DEFAULT_CONFIG['table_format']}): ").strip()
    config["table_format"] = table_format or DEFAULT_CONFIG["table_format"]

    warn_input = input("Warn about missing optional elements? (Y/n): ").strip().lower()
    config["warn_missing_nodes"] = warn_input != "n"

    config_path = os.path.abspath(CONFIG_FILENAME)
    with open(config_path, "w") as f:
        json.dump(config, f, indent=4)
    print(f"\nConfiguration saved to {config_path}")
