"""Messages shown to the user."""


def print_error(message):
    print(f"Error: {message}")


def print_runtime_missing(config):
    print("Error: Wine is not installed. Please install Wine to run this program.")
    print(f"You can download and install Wine from: {config.runtime_install_url}")


def print_success_banner(config):
    """Success message with credits and licensing for the WfcPatcher helper."""
    print("-------------------------------------")
    print(f"ReviveMii Patcher Public Beta {config.version}")
    print(f"Game was patched successfully! It's \"{config.output_name}\" now")
    print("-------------------------------------")
    print("Credits:")
    print("helper.exe is https://github.com/AdmiralCurtiss/WfcPatcher")
    print("helper.exe is licensed under the GNU General Public License v3.0 and because of this "
          "this Program is also licensed under the GNU General Public License v3.0.")
    print()
    print("You can get this Program Source code on https://github.com/ReviveMii/Patcher")
    print()
    print("(c) 2024. ReviveMii Project. https://revivemii.fr.to/")
