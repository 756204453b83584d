from dotenv import load_dotenv
import uvicorn

# Load environment variables
load_dotenv()

# Expose app for Uvicorn
from main import app  # noqa: E402
from config.env_config import ENVIRONMENT, PORT  # noqa: E402

host = "0.0.0.0"  # listen on all interfaces for Docker

if __name__ == "__main__":
    reload_flag = ENVIRONMENT == "Development"
    uvicorn.run("server:app", host=host, port=PORT, reload=reload_flag)
