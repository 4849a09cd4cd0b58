import httpx
import asyncio
import os

PORT = os.environ.get("PORT", "8080")
REGION = os.environ.get("REGION", "united states")

async def test_api():
    url = f"http://127.0.0.1:{PORT}/track/{REGION}"

    print(f"Sending request to {url}...")
    try:
        async with httpx.AsyncClient(trust_env=False) as client:
            response = await client.get(url, timeout=30.0)
            print(f"Status Code: {response.status_code}")
            if response.status_code == 200:
                data = response.json()
                print("Response JSON:")
                print(data)

                if data.get("name") and data.get("artist", {}).get("image_url"):
                     print("\n✅ Verification SUCCESS: Received track info.")
                     print(f"Lyrics length: {len(data.get('lyrics', ''))}")
                else:
                     print("\n❌ Verification FAILED: Invalid response structure.")
            else:
                print(f"Error Response: {response.text}")
    except Exception as e:
        print(f"Request Failed: {e}")

if __name__ == "__main__":
    asyncio.run(test_api())
