import asyncio
import uvicorn
from wavechat.utils import load_env
from wavechat.adapters.controller.api_controller import APIController

async def main():
    """
    Main function to initialize and start the API server.
    """
    load_env()

    # Create API controller
    api_controller = APIController()

    # Initialize the database service (seeds sample data on first run)
    print("Initializing database service...")
    await api_controller.initialize()
    print("Database service initialized successfully")

    # Get the FastAPI app
    app = api_controller.get_app()

    # Run the server
    host = api_controller.config.get("host", "0.0.0.0")
    port = api_controller.config.get("port", 8000)
    print(f"Starting API server on {host}:{port}...")
    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()

if __name__ == "__main__":
    asyncio.run(main())
