# Helper modules shared by the vcprompt commands
