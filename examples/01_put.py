"""
Add files to a storage node
"""
import asyncio
from blobpy import BlobClient, FileInput, UploadOptions, RequestFailed


async def main():
    async with BlobClient("http://127.0.0.1:5001/api/v0/") as client:
        
        # Add in-memory content
        added = await client.put(FileInput(b"hello world", 0, "hello.txt"))
        print(f"Added: {added.cid} {added.path} ({added.size} bytes)")
        
        # Add local files, pinned, as CIDv1
        entries = await client.put_paths(
            ["document.pdf", "photo.jpg"],
            UploadOptions(pin=True, cid_version=1, raw_leaves=True)
        )
        for entry in entries:
            print(f"{entry.cid}  {entry.path}")
        
        # Only compute the identifier, store nothing
        preview = await client.put(
            FileInput.from_path("large_file.zip"),
            UploadOptions(only_hash=True)
        )
        print(f"Would be stored as: {preview.cid}")
        
        # Wrap in a directory; the last entry is the directory itself
        entries = await client.put_all(
            [FileInput(b"a", 0, "a.txt"), FileInput(b"b", 0, "b.txt")],
            UploadOptions(wrap_with_directory=True)
        )
        print(f"Directory: {entries[-1].cid}")
        
        # Progress, timeout and cancellation
        def on_progress(progress):
            print(f"Progress: {progress.percentage:.1f}%")
        
        cancel = asyncio.Event()
        try:
            added = await client.put(
                FileInput.from_path("video.mp4"),
                UploadOptions(progress=on_progress, timeout=300, signal=cancel)
            )
            print(f"Added: {added}")
        except RequestFailed as e:
            print(f"Service refused the upload: {e.status_text}")


if __name__ == "__main__":
    asyncio.run(main())
