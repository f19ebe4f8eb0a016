import logging
from typing import Optional

import boto3
from botocore.config import Config

from vpc_resolver.config.schemas.aws_schema import AWSConfig

logger = logging.getLogger(__name__)


class AWSClient:
    """
    AWS client management for one region.

    Clients are created on first use so that building an AWSClient never
    touches the network. Retry and connect-timeout policy for the describe
    calls is owned here, through the botocore client config.
    """

    def __init__(self, region_name: str, config: Optional[AWSConfig] = None):
        """
        Initialize AWS client with configuration.

        Args:
            region_name: AWS region name
            config: Optional AWS configuration, defaults are used when omitted
        """
        self.region_name = region_name
        self.aws_config = config or AWSConfig()
        self.config = Config(
            region_name=region_name,
            retries={
                'max_attempts': self.aws_config.max_attempts,
                'mode': 'standard'
            },
            connect_timeout=self.aws_config.connect_timeout_ms / 1000
        )
        self._session: Optional[boto3.session.Session] = None
        self._ec2_client = None

    @property
    def session(self) -> boto3.session.Session:
        """Session owned by this client, one per AWSClient so threads never share one."""
        if self._session is None:
            self._session = boto3.session.Session(
                profile_name=self.aws_config.profile,
                region_name=self.region_name
            )
        return self._session

    @property
    def ec2_client(self):
        """EC2 client for the configured region."""
        if self._ec2_client is None:
            logger.debug(f"Creating EC2 client for region {self.region_name}")
            self._ec2_client = self.session.client(
                'ec2',
                config=self.config,
                endpoint_url=self.aws_config.endpoint_url
            )
        return self._ec2_client
