"""
Quick demo script to try the action and speech endpoints.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Voice To-Do Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:      GET  http://localhost:8000/health")
    print("   - Determine Action:  POST http://localhost:8000/actions/determine")
    print("   - Transcribe Audio:  POST http://localhost:8000/speech/transcribe")
    print("   - API Docs:               http://localhost:8000/docs")
    print()
    print("🔑 Configuration (.env):")
    print("   GOOGLE_API_KEY, ELEVENLABS_API_KEY")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/actions/determine" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"text": "buy groceries", "emoji": "🛒"}\'')
    print()
    print('   curl -X POST "http://localhost:8000/speech/transcribe" \\')
    print('     -F "file=@/path/to/recording.webm;type=audio/webm"')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
