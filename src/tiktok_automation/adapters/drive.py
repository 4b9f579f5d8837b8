#!/usr/bin/env python3
"""
Google Drive Asset Store
Fetches the raw background video and saves finished videos using Drive API v3
"""

import io
import os
import pickle
from typing import Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google_auth_httplib2 import AuthorizedHttp
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiError
from googleapiclient.http import MediaIoBaseDownload, MediaIoBaseUpload

from tiktok_automation.adapters import http
from tiktok_automation.domain.errors import CollaboratorError, EmptyResultError
from tiktok_automation.domain.models import Artifact
from tiktok_automation.ports.interfaces import IAssetStore

# Drive API scopes
SCOPES = [
    'https://www.googleapis.com/auth/drive.file',
    'https://www.googleapis.com/auth/drive.readonly',
]

VIDEO_MIME_TYPE = 'video/mp4'

# Errors a Drive call can surface: API replies, transport and auth problems
DRIVE_ERRORS = (GoogleApiError, GoogleAuthError, httplib2.HttpLib2Error, OSError)


class GoogleDriveStore(IAssetStore):
    """
    Reads and writes videos in Google Drive
    """

    def __init__(
        self,
        credentials_file: Optional[str] = None,
        token_file: Optional[str] = None,
        fetch_mode: Optional[str] = None,
        timeout: Optional[float] = None,
        service=None,
    ):
        """
        Initialize the Drive store

        Args:
            credentials_file: Path to OAuth2 client credentials JSON file
            token_file: Path to store/load OAuth2 token
            fetch_mode: 'link' returns the raw video by URL, 'download' returns its bytes
            timeout: Socket timeout in seconds for every Drive call
            service: Prebuilt Drive service (skips authentication)
        """
        from tiktok_automation import config
        self.credentials_file = credentials_file or config.GOOGLE_DRIVE_CREDENTIALS_FILE
        self.token_file = token_file or config.GOOGLE_DRIVE_TOKEN_FILE
        self.fetch_mode = (fetch_mode or config.DRIVE_FETCH_MODE).lower()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
        self.drive = service
        self.credentials = None

        if self.fetch_mode not in ('link', 'download'):
            raise ValueError(f"Unknown Drive fetch mode: {self.fetch_mode}")

    def authenticate(self):
        """
        Authenticate with the Drive API using OAuth2.
        Raises CollaboratorError when no usable credentials can be obtained.
        """
        try:
            # Load existing token if available
            if os.path.exists(self.token_file):
                try:
                    with open(self.token_file, 'rb') as token:
                        self.credentials = pickle.load(token)
                except (pickle.UnpicklingError, EOFError, AttributeError, ImportError, IndexError) as e:
                    # Unreadable cache: authenticate again and overwrite it
                    print(f"⚠️  Ignoring unreadable token file {self.token_file}: {e}")
                    self.credentials = None

            # If no valid credentials, get new ones
            if not self.credentials or not self.credentials.valid:
                if self.credentials and self.credentials.expired and self.credentials.refresh_token:
                    # Refresh expired token
                    self.credentials.refresh(Request())
                else:
                    # Run OAuth flow
                    if not os.path.exists(self.credentials_file):
                        raise CollaboratorError(
                            f"Credentials file not found: {self.credentials_file}. "
                            "Download OAuth2 credentials from Google Cloud Console."
                        )

                    flow = InstalledAppFlow.from_client_secrets_file(
                        self.credentials_file, SCOPES)
                    self.credentials = flow.run_local_server(port=0)

                # Save credentials for next time
                with open(self.token_file, 'wb') as token:
                    pickle.dump(self.credentials, token)

            # Build Drive API service with the client-wide timeout
            authed_http = AuthorizedHttp(self.credentials, http=httplib2.Http(timeout=self.timeout))
            self.drive = build('drive', 'v3', http=authed_http, cache_discovery=False)
            print("✅ Google Drive API authenticated successfully")

        except DRIVE_ERRORS as e:
            raise CollaboratorError(f"Drive authentication failed: {e}") from e

    def _service(self):
        if not self.drive:
            self.authenticate()
        return self.drive

    def fetch_video(self, file_id: str) -> Artifact:
        """
        Look up the raw video

        Returns:
            The webContentLink by reference, or the file bytes by value in 'download' mode
        """
        drive = self._service()
        try:
            file = drive.files().get(
                fileId=file_id,
                fields='id, name, mimeType, webContentLink'
            ).execute()
            print(f"   File: {file.get('name', file_id)}")

            if self.fetch_mode == 'download':
                return Artifact.by_value(
                    self._download(drive, file_id),
                    file.get('mimeType') or VIDEO_MIME_TYPE
                )
        except DRIVE_ERRORS as e:
            raise CollaboratorError(f"Failed to fetch video {file_id} from Google Drive: {e}") from e

        link = file.get('webContentLink')
        if not link:
            raise EmptyResultError(f"Drive file {file_id} has no webContentLink")
        return Artifact.by_reference(link, file.get('mimeType') or VIDEO_MIME_TYPE)

    def _download(self, drive, file_id: str) -> bytes:
        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, drive.files().get_media(fileId=file_id))
        done = False
        while not done:
            status, done = downloader.next_chunk()
            if status:
                print(f"\r   Download progress: {int(status.progress() * 100)}%", end='', flush=True)
        print()
        data = buffer.getvalue()
        if not data:
            raise EmptyResultError(f"Drive file {file_id} is empty")
        return data

    def persist(self, artifact: Artifact, folder_id: str, file_name: str) -> str:
        """
        Upload the merged video into folder_id

        Args:
            artifact: Merged video; downloaded first when held by reference
            folder_id: Destination folder ID
            file_name: Name for the stored file

        Returns:
            Name of the stored file as reported by Drive
        """
        if artifact.is_reference:
            print(f"   Downloading merged video: {artifact.url}")
            data = http.download(artifact.url, self.timeout)
        else:
            data = artifact.data

        drive = self._service()
        body = {
            'name': file_name,
            'parents': [folder_id],
            'mimeType': VIDEO_MIME_TYPE
        }
        media = MediaIoBaseUpload(io.BytesIO(data), mimetype=VIDEO_MIME_TYPE, resumable=True)

        print(f"📤 Uploading video to Google Drive: {file_name}")
        print(f"   Size: {len(data)} bytes")
        try:
            request = drive.files().create(body=body, media_body=media, fields='id, name')
            response = self._resumable_upload(request)
        except DRIVE_ERRORS as e:
            raise CollaboratorError(f"Failed to upload video to Google Drive: {e}") from e

        if not response or 'id' not in response:
            raise EmptyResultError(f"Unexpected Drive upload response: {response}")
        print(f"   File ID: {response['id']}")
        return response.get('name', file_name)

    def _resumable_upload(self, request):
        """
        Execute resumable upload with progress tracking
        """
        response = None
        while response is None:
            status, response = request.next_chunk()
            if status:
                progress = int(status.progress() * 100)
                print(f"\r   Upload progress: {progress}%", end='', flush=True)
        print(" ✅")
        return response
