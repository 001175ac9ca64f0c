import uvicorn

from ds_product_intel.config import settings

if __name__ == "__main__":
    uvicorn.run("ds_product_intel.api.app:app", host=settings.api_host, port=settings.api_port)
