import uvicorn

from actrac.core.config import settings

if __name__ == "__main__":
    uvicorn.run("actrac.main:app", host=settings.HOST, port=settings.PORT)
