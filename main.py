from dotenv import load_dotenv

load_dotenv()

from tripledger.main import app  # noqa: E402
from tripledger.core.config import settings  # noqa: E402

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
